"""Domain layer for oopconcepts."""

from oopconcepts.domain.account import BankAccount
from oopconcepts.domain.vehicle import Vehicle, Car, ElectricScooter
from oopconcepts.domain.payment import (
    Payment,
    CreditCardPayment,
    PayPalPayment,
    BankTransferPayment,
)
from oopconcepts.domain.shape import Shape, Circle, Rectangle, Triangle

__all__ = [
    "BankAccount",
    "Vehicle",
    "Car",
    "ElectricScooter",
    "Payment",
    "CreditCardPayment",
    "PayPalPayment",
    "BankTransferPayment",
    "Shape",
    "Circle",
    "Rectangle",
    "Triangle",
]
