"""Payment methods sharing transaction id generation."""

import uuid
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

from oopconcepts.domain.money import to_decimal
from oopconcepts.utils.masking import mask_card_number


class Payment(ABC):
    """Base payment holding an amount and a transaction id.

    Subclasses add the identifier of the paying party and describe how
    the payment is processed.
    """

    def __init__(self, amount: Decimal | int | float | str):
        """Initialize payment.

        Args:
            amount: Payment amount, fixed for the lifetime of the payment
        """
        self._amount = to_decimal(amount)
        self._transaction_id: Optional[str] = None

    @property
    def amount(self) -> Decimal:
        return self._amount

    @property
    def transaction_id(self) -> Optional[str]:
        return self._transaction_id

    @property
    def has_transaction_id(self) -> bool:
        return self._transaction_id is not None

    def generate_transaction_id(self) -> str:
        """Assign a fresh transaction id, replacing any previous one.

        Returns:
            The new transaction id
        """
        self._transaction_id = str(uuid.uuid4())
        return self._transaction_id

    def amount_line(self) -> str:
        """Return the amount formatted as currency."""
        return f"Amount: ${self._amount:.2f}"

    @abstractmethod
    def process_payment(self) -> list[str]:
        """Describe the processing of this payment.

        Returns:
            Report lines: processing method, payer identifier, amount
        """
        pass


class CreditCardPayment(Payment):
    """Payment charged to a credit card."""

    def __init__(self, amount: Decimal | int | float | str, card_number: str):
        super().__init__(amount)
        self.card_number = card_number

    def process_payment(self) -> list[str]:
        return [
            "Processing Credit Card Payment...",
            f"Charging card: {mask_card_number(self.card_number)}",
            self.amount_line(),
        ]


class PayPalPayment(Payment):
    """Payment through a PayPal account."""

    def __init__(self, amount: Decimal | int | float | str, email: str):
        super().__init__(amount)
        self.email = email

    def process_payment(self) -> list[str]:
        return [
            "Processing PayPal Payment...",
            f"Paying through account: {self.email}",
            self.amount_line(),
        ]


class BankTransferPayment(Payment):
    """Payment transferred from a bank account."""

    def __init__(self, amount: Decimal | int | float | str, account_number: str):
        super().__init__(amount)
        self.account_number = account_number

    def process_payment(self) -> list[str]:
        return [
            "Processing Bank Transfer...",
            f"Transferring from account: {self.account_number}",
            self.amount_line(),
        ]


PAYMENT_TYPES: dict[str, type[Payment]] = {
    "credit-card": CreditCardPayment,
    "paypal": PayPalPayment,
    "bank-transfer": BankTransferPayment,
}


def transaction_id_record(transaction_id: Optional[str]) -> str:
    """Return the line announcing a transaction id."""
    return f"Transaction Id: {transaction_id}"
