"""Bank account command."""

import click
from oopconcepts.cli.error_handling import fail, handle_domain_error, parse_amount_or_exit
from oopconcepts.domain.account import BankAccount, deposit_record, withdrawal_record
from oopconcepts.domain.errors import DomainError

ACTIONS = ("deposit", "withdraw")


@click.command("account")
@click.argument("actions", nargs=-1, required=True, metavar="ACTION...")
@click.option(
    "--opening-balance",
    help="Amount deposited before the actions run (e.g., 500.00)",
)
@click.pass_context
def account_command(ctx, actions: tuple[str, ...], opening_balance: str | None):
    """Run deposits and withdrawals against a new account.

    Each ACTION is deposit=AMOUNT or withdraw=AMOUNT and they are applied
    in order. A failing action stops the run.

    Examples:
        oopconcepts account deposit=100 withdraw=30
        oopconcepts account --opening-balance 500 withdraw=120.50
    """
    steps = []
    for action in actions:
        name, sep, amount = action.partition("=")
        if not sep or name not in ACTIONS:
            fail(ctx, f"Invalid action '{action}': expected deposit=AMOUNT or withdraw=AMOUNT")
        steps.append((name, parse_amount_or_exit(ctx, amount)))

    if opening_balance is not None:
        steps.insert(0, ("deposit", parse_amount_or_exit(ctx, opening_balance)))

    account = BankAccount()
    try:
        for name, amount in steps:
            if name == "deposit":
                click.echo(deposit_record(amount, account.deposit(amount)))
            else:
                click.echo(withdrawal_record(amount, account.withdraw(amount)))
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Final balance: {account.balance}")


def register_commands(cli):
    """Register account command with main CLI."""
    cli.add_command(account_command)
