from typing import Literal

import click
import tomlkit
from pydantic import TypeAdapter

from ledgerdecimal.cli import cli
from ledgerdecimal.config import CONFIG_FILE, save_config_to_file, settings
from ledgerdecimal.exceptions.config import ConfigFileExists


@cli.group()
def config() -> None:
    """
    Configuration commands
    """


@config.command("show")
@click.option(
    "--json",
    "output_format",
    flag_value="json",
    type=str,
    help="Show configuration in JSON format",
)
@click.option(
    "--toml",
    "output_format",
    flag_value="toml",
    type=str,
    help="Show configuration in TOML format (default)",
    default=True,
)
def config_show(output_format: Literal["json", "toml"]) -> None:
    """
    Show the active configuration.
    """

    match output_format:
        case "json":
            click.echo(
                TypeAdapter(dict).dump_json(
                    settings.model_dump(),
                    indent=2,
                ),
            )
        case "toml":
            click.echo(
                tomlkit.dumps(
                    settings.model_dump(),
                ),
            )


@config.command("init")
@click.option(
    "--force",
    is_flag=True,
    help="Overwrite an existing configuration file",
)
def config_init(*, force: bool) -> None:
    """
    Write the active configuration to the configuration file.
    """

    try:
        save_config_to_file(settings, CONFIG_FILE, overwrite=force)
    except ConfigFileExists as exc:
        raise click.ClickException(f"{exc.message} Use --force to replace it.") from None

    click.echo(f"Wrote configuration to {CONFIG_FILE}")
