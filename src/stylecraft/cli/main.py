"""stylecraft CLI entry point: Click group with subcommands."""

import click

from stylecraft import __version__


@click.group()
@click.version_option(version=__version__, prog_name="stylecraft")
def cli() -> None:
    """stylecraft - compile nested style objects into flat CSS."""


# Import and register subcommands
from stylecraft.cli.compile import compile_css  # noqa: E402
from stylecraft.cli.inspect import inspect  # noqa: E402

cli.add_command(compile_css)
cli.add_command(inspect)
