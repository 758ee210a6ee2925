"""Fixed walkthrough of all four concepts."""

from decimal import Decimal

import click
from oopconcepts.cli.error_handling import handle_domain_error
from oopconcepts.domain.account import BankAccount, deposit_record, withdrawal_record
from oopconcepts.domain.errors import DomainError
from oopconcepts.domain.payment import (
    BankTransferPayment,
    CreditCardPayment,
    PayPalPayment,
    transaction_id_record,
)
from oopconcepts.domain.shape import Circle, Rectangle, Triangle
from oopconcepts.domain.vehicle import Car, ElectricScooter


@click.command("demo")
@click.pass_context
def run_demo(ctx):
    """Run the full walkthrough.

    Output order is fixed: account, vehicles, payments, shapes.
    """
    try:
        _encapsulation()
        _abstraction()
        _inheritance()
        _polymorphism()
    except DomainError as e:
        handle_domain_error(ctx, e)


def _encapsulation() -> None:
    account = BankAccount()

    amount = Decimal("10000")
    click.echo(deposit_record(amount, account.deposit(amount)))

    amount = Decimal("200")
    click.echo(withdrawal_record(amount, account.withdraw(amount)))


def _abstraction() -> None:
    car = Car()
    scooter = ElectricScooter()

    click.echo(car.start())
    click.echo(car.fuel_status())
    click.echo(car.stop())

    click.echo(scooter.start())
    click.echo(scooter.stop())


def _inheritance() -> None:
    payments = [
        CreditCardPayment(Decimal("150.75"), card_number="**** **** **** 1234"),
        PayPalPayment(Decimal("89.99"), email="user@example.com"),
        BankTransferPayment(Decimal("500.00"), account_number="1234567890"),
    ]

    for i, payment in enumerate(payments):
        if i > 0:
            click.echo()
        click.echo(transaction_id_record(payment.generate_transaction_id()))
        for line in payment.process_payment():
            click.echo(line)


def _polymorphism() -> None:
    shapes = [
        Circle(radius=5, color="Red"),
        Rectangle(width=10, height=4, color="Blue"),
        Triangle(base=8, height=6, color="Green"),
    ]

    # Same call, different behavior per shape
    for shape in shapes:
        click.echo(shape.draw())


def register_commands(cli):
    """Register demo command with main CLI."""
    cli.add_command(run_demo)
