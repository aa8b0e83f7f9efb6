"""Stylefold CLI entry point: Click group with subcommands."""

import click

from stylefold import __version__


@click.group()
@click.version_option(version=__version__, prog_name="stylefold")
def cli() -> None:
    """Stylefold - compile tagged CSS templates into compact rule builders."""


# Import and register subcommands
from stylefold.cli.compile import compile_command  # noqa: E402
from stylefold.cli.inspect import inspect  # noqa: E402

cli.add_command(compile_command)
cli.add_command(inspect)
