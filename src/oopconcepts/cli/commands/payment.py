"""Payment command."""

import click
from oopconcepts.cli.error_handling import parse_amount_or_exit
from oopconcepts.domain.payment import PAYMENT_TYPES, transaction_id_record


@click.command("payment")
@click.argument("kind", type=click.Choice(sorted(PAYMENT_TYPES)))
@click.argument("amount")
@click.argument("identifier")
@click.option(
    "--no-transaction-id",
    is_flag=True,
    help="Process without generating a transaction id first",
)
@click.pass_context
def payment_command(ctx, kind: str, amount: str, identifier: str, no_transaction_id: bool):
    """Process a payment.

    IDENTIFIER is the card number, PayPal email or bank account number,
    depending on KIND. Card numbers are masked in the output.

    Examples:
        oopconcepts payment credit-card 150.75 "4111 1111 1111 1234"
        oopconcepts payment paypal 89.99 user@example.com
        oopconcepts payment bank-transfer 500.00 1234567890
    """
    payment = PAYMENT_TYPES[kind](parse_amount_or_exit(ctx, amount), identifier)

    if no_transaction_id:
        click.echo("Warning: processing payment without a transaction id", err=True)
    else:
        click.echo(transaction_id_record(payment.generate_transaction_id()))

    for line in payment.process_payment():
        click.echo(line)


def register_commands(cli):
    """Register payment command with main CLI."""
    cli.add_command(payment_command)
