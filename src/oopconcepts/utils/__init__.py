"""Utility functions for oopconcepts."""

from oopconcepts.utils.amount_parser import parse_amount
from oopconcepts.utils.masking import mask_card_number

__all__ = ["parse_amount", "mask_card_number"]
