"""Main CLI entry point."""

import click

# Import and register all commands at module level
from oopconcepts.cli.commands import (
    demo,
    account,
    vehicle,
    payment,
    shape,
)


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx):
    """oopconcepts - Object-oriented programming walkthrough.

    Shows encapsulation (bank account), abstraction (vehicles), inheritance
    (payments) and polymorphism (shapes). Without a command, runs the full
    demo.
    """
    if ctx.invoked_subcommand is None:
        ctx.invoke(demo.run_demo)


# Register all commands
demo.register_commands(cli)
account.register_commands(cli)
vehicle.register_commands(cli)
payment.register_commands(cli)
shape.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
