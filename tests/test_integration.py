"""Integration tests for the full demo."""

import re

from oopconcepts.cli.main import cli

UUID_PATTERN = r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}"

EXPECTED_OUTPUT = [
    "Deposited amount: 10000 and Current Balance is: 10000",
    "Withdrawal Amount: 200 and Available Balance: 9800",
    "Car started with key ignition.",
    "Fuel level: OK",
    "Car stopped safely.",
    "Scooter started with a power button.",
    "Scooter powered off.",
    "Transaction Id: <id>",
    "Processing Credit Card Payment...",
    "Charging card: **** **** **** 1234",
    "Amount: $150.75",
    "",
    "Transaction Id: <id>",
    "Processing PayPal Payment...",
    "Paying through account: user@example.com",
    "Amount: $89.99",
    "",
    "Transaction Id: <id>",
    "Processing Bank Transfer...",
    "Transferring from account: 1234567890",
    "Amount: $500.00",
    "Drawing a Red Circle with radius 5",
    "Drawing a Blue Rectangle with width 10 and height 4",
    "Drawing a Green Triangle with base 8 and height 6",
]


def _normalize(output: str) -> list[str]:
    return [re.sub(UUID_PATTERN, "<id>", line) for line in output.splitlines()]


def test_demo_output(cli_runner):
    """Test that the demo prints every section in order."""
    result = cli_runner.invoke(cli, ["demo"])

    assert result.exit_code == 0
    assert _normalize(result.output) == EXPECTED_OUTPUT


def test_demo_is_default_command(cli_runner):
    """Test that running without a command runs the demo."""
    result = cli_runner.invoke(cli, [])

    assert result.exit_code == 0
    assert _normalize(result.output) == EXPECTED_OUTPUT


def test_demo_transaction_ids_are_unique(cli_runner):
    """Test that each payment gets its own transaction id."""
    result = cli_runner.invoke(cli, ["demo"])

    ids = re.findall(UUID_PATTERN, result.output)
    assert len(ids) == 3
    assert len(set(ids)) == 3


def test_demo_stops_on_domain_error(cli_runner, monkeypatch):
    """Test that a failing account step aborts the rest of the demo."""
    from oopconcepts.domain.account import BankAccount
    from oopconcepts.domain.errors import InsufficientFundsError, insufficient_balance

    def failing_withdraw(self, amount):
        raise InsufficientFundsError(insufficient_balance())

    monkeypatch.setattr(BankAccount, "withdraw", failing_withdraw)
    result = cli_runner.invoke(cli, ["demo"])

    assert result.exit_code == 1
    assert "Deposited amount: 10000" in result.output
    assert "Error: Insufficient Balance" in result.output
    assert "Car started" not in result.output


def test_help_lists_commands(cli_runner):
    """Test that --help shows every command."""
    result = cli_runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    for command in ("demo", "account", "vehicle", "payment", "shape"):
        assert command in result.output
