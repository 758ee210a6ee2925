"""Bank account with an encapsulated balance."""

from decimal import Decimal

from oopconcepts.domain.errors import (
    InsufficientFundsError,
    ValidationError,
    amount_not_positive,
    insufficient_balance,
)
from oopconcepts.domain.money import to_decimal


class BankAccount:
    """Account whose balance only changes through deposit and withdraw."""

    def __init__(self):
        self._balance = Decimal("0")

    @property
    def balance(self) -> Decimal:
        """Current balance."""
        return self._balance

    def deposit(self, amount: Decimal | int | float | str) -> Decimal:
        """Add money to the account.

        Args:
            amount: Amount to deposit, must be positive

        Returns:
            New balance

        Raises:
            ValidationError: If amount is zero or negative
        """
        amount = to_decimal(amount)
        if amount <= 0:
            raise ValidationError(amount_not_positive())

        self._balance += amount
        return self._balance

    def withdraw(self, amount: Decimal | int | float | str) -> Decimal:
        """Take money out of the account.

        The amount must be strictly below the balance; withdrawing the
        whole balance is refused.

        Args:
            amount: Amount to withdraw, must be positive

        Returns:
            New balance

        Raises:
            ValidationError: If amount is zero or negative
            InsufficientFundsError: If amount is not below the balance
        """
        amount = to_decimal(amount)
        if amount <= 0:
            raise ValidationError(amount_not_positive())

        if self._balance <= amount:
            raise InsufficientFundsError(insufficient_balance())

        self._balance -= amount
        return self._balance


def deposit_record(amount: Decimal, balance: Decimal) -> str:
    """Return the line describing a completed deposit."""
    return f"Deposited amount: {amount} and Current Balance is: {balance}"


def withdrawal_record(amount: Decimal, balance: Decimal) -> str:
    """Return the line describing a completed withdrawal."""
    return f"Withdrawal Amount: {amount} and Available Balance: {balance}"
