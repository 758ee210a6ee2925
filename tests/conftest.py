"""Shared pytest fixtures for oopconcepts tests."""

from decimal import Decimal
import pytest

from oopconcepts.domain.account import BankAccount
from oopconcepts.domain.payment import (
    BankTransferPayment,
    CreditCardPayment,
    PayPalPayment,
)


@pytest.fixture
def account():
    """Create an empty bank account."""
    return BankAccount()


@pytest.fixture
def funded_account(account):
    """Create an account holding 1000."""
    account.deposit(Decimal("1000"))
    return account


@pytest.fixture
def sample_payments():
    """One payment of each kind, matching the demo."""
    return [
        CreditCardPayment(Decimal("150.75"), card_number="**** **** **** 1234"),
        PayPalPayment(Decimal("89.99"), email="user@example.com"),
        BankTransferPayment(Decimal("500.00"), account_number="1234567890"),
    ]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
