import click

from ledgerdecimal.cli import cli
from ledgerdecimal.config import settings
from ledgerdecimal.conversions import format_decimal, parse_decimal
from ledgerdecimal.exceptions.arithmetic import DecimalError


@cli.command("parse")
@click.argument("value")
@click.option(
    "--decimals",
    type=click.IntRange(min=0),
    default=None,
    help="Fractional digits of the scaled integer (default from configuration)",
)
def parse(value: str, decimals: int | None) -> None:
    """
    Convert a decimal number into a scaled integer. Excess digits are truncated.
    """

    if decimals is None:
        decimals = settings.default_decimals

    try:
        click.echo(parse_decimal(value, decimals))
    except DecimalError as exc:
        raise click.BadParameter(str(exc.message), param_hint="VALUE") from None


@cli.command("format")
@click.argument("scaled_integer", type=int)
@click.option(
    "--decimals",
    type=click.IntRange(min=0),
    default=None,
    help="Fractional digits of the scaled integer (default from configuration)",
)
def format_(scaled_integer: int, decimals: int | None) -> None:
    """
    Convert a scaled integer into a decimal number.
    """

    if decimals is None:
        decimals = settings.default_decimals

    click.echo(format_decimal(scaled_integer, decimals))
