"""CLI error reporting and input parsing that exits on failure."""

from __future__ import annotations

from decimal import Decimal
from typing import NoReturn

import click
from oopconcepts.domain.errors import DomainError
from oopconcepts.utils.amount_parser import parse_amount


def fail(ctx: click.Context, message: str) -> NoReturn:
    """Print an error to stderr and exit with status 1."""
    click.echo(f"Error: {message}", err=True)
    ctx.exit(1)


def handle_domain_error(ctx: click.Context, error: DomainError) -> NoReturn:
    """Report a domain error raised by a command and stop."""
    fail(ctx, str(error))


def parse_amount_or_exit(ctx: click.Context, amount: str) -> Decimal:
    """Parse a command-line amount, or exit with a CLI error."""
    try:
        return parse_amount(amount)
    except ValueError as exc:
        fail(ctx, f"Invalid amount format: {exc}")
