"""Shape drawing command."""

import click
from oopconcepts.cli.error_handling import fail
from oopconcepts.domain.errors import wrong_dimension_count
from oopconcepts.domain.shape import DEFAULT_COLOR, SHAPE_TYPES


@click.command("shape")
@click.argument("kind", type=click.Choice(sorted(SHAPE_TYPES)))
@click.argument("dimensions", nargs=-1, type=float)
@click.option(
    "--color",
    default=DEFAULT_COLOR,
    show_default=True,
    envvar="OOPCONCEPTS_SHAPE_COLOR",
    help="Initial color (overrides OOPCONCEPTS_SHAPE_COLOR environment variable)",
)
@click.option(
    "--recolor",
    multiple=True,
    help="Change color and draw again; may be repeated",
)
@click.pass_context
def shape_command(ctx, kind: str, dimensions: tuple[float, ...], color: str, recolor: tuple[str, ...]):
    """Draw a shape.

    DIMENSIONS are the radius for a circle, width and height for a
    rectangle, and base and height for a triangle.

    Examples:
        oopconcepts shape circle 5 --color Red
        oopconcepts shape rectangle 10 4 --recolor Blue
    """
    shape_cls, expected = SHAPE_TYPES[kind]
    if len(dimensions) != expected:
        fail(ctx, wrong_dimension_count(shape_cls.__name__, expected, len(dimensions)))

    shape = shape_cls(*dimensions, color=color)
    click.echo(shape.draw())

    for new_color in recolor:
        shape.set_color(new_color)
        click.echo(shape.draw())


def register_commands(cli):
    """Register shape command with main CLI."""
    cli.add_command(shape_command)
