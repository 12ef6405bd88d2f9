import click

from ledgerdecimal.version import __version__


@click.group()
@click.version_option(version=__version__)
def cli() -> None: ...


from . import config, convert  # noqa: F401, E402
