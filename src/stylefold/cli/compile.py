"""CLI command: stylefold compile -- print the rewritten call."""

from __future__ import annotations

import click

from stylefold.cli.options import build_config, compile_options, load_and_compile
from stylefold.emit import render_call


@click.command("compile")
@compile_options
def compile_command(
    template_file: str, keyframes: bool, no_prefix: bool, marker_base: int, verbose: bool
) -> None:
    """Compile a tagged template file and print the JavaScript call replacing it."""
    config = build_config(marker_base, no_prefix)
    call = load_and_compile(template_file, config, keyframes, verbose)
    click.echo(render_call(call, config))
