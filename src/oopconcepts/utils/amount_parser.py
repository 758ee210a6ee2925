"""Amount parsing utilities."""

from decimal import Decimal
import re

from oopconcepts.domain.errors import ValidationError
from oopconcepts.domain.money import to_decimal


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "1,234.56"
    - "-50" (parsed, rejected later by the account as not positive)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    cleaned = re.sub(r"[$€£¥,\s]", "", amount_str)

    try:
        return to_decimal(cleaned)
    except ValidationError as e:
        raise ValueError(f"Could not parse amount '{amount_str.strip()}'") from e
