"""Vehicle command."""

import click
from oopconcepts.domain.vehicle import VEHICLE_TYPES


@click.command("vehicle")
@click.argument("kind", type=click.Choice(sorted(VEHICLE_TYPES)))
@click.option("--fuel-status", is_flag=True, help="Report fuel level between start and stop")
def vehicle_command(kind: str, fuel_status: bool):
    """Start and stop a vehicle.

    Examples:
        oopconcepts vehicle car --fuel-status
        oopconcepts vehicle scooter
    """
    vehicle = VEHICLE_TYPES[kind]()

    click.echo(vehicle.start())
    if fuel_status:
        click.echo(vehicle.fuel_status())
    click.echo(vehicle.stop())


def register_commands(cli):
    """Register vehicle command with main CLI."""
    cli.add_command(vehicle_command)
