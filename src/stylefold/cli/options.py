"""Options and helpers shared by the CLI commands."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable

import click

from stylefold.compiler.engine import Compiler
from stylefold.compiler.markers import DEFAULT_MARKER_BASE
from stylefold.config import CompilerConfig
from stylefold.errors import CompileError
from stylefold.host import NotAStyledTemplateError, RewrittenCall, rewrite_tagged
from stylefold.parser import ParseError, parse_template


def compile_options(fn: Callable) -> Callable:
    """Attach the options every compiling command accepts."""
    fn = click.option("--verbose", "-v", is_flag=True, help="Log compilation stages")(fn)
    fn = click.option(
        "--marker-base", default=DEFAULT_MARKER_BASE, type=int, show_default=True,
        help="First code point reserved for markers",
    )(fn)
    fn = click.option("--no-prefix", is_flag=True, help="Skip the vendor-prefixing pass")(fn)
    fn = click.option(
        "--keyframes", is_flag=True, help="Compile an untagged template as a keyframes body"
    )(fn)
    fn = click.argument("template_file", type=click.Path(exists=True, dir_okay=False))(fn)
    return fn


def build_config(marker_base: int, no_prefix: bool) -> CompilerConfig:
    try:
        return CompilerConfig(marker_base=marker_base, vendor_prefixes=not no_prefix)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--marker-base") from exc


def load_and_compile(
    template_file: str, config: CompilerConfig, keyframes: bool, verbose: bool
) -> RewrittenCall:
    """Parse and compile *template_file*; exit with status 1 on any error."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    path = Path(template_file)
    try:
        tagged = parse_template(path.read_text(encoding="utf-8"))
        return rewrite_tagged(tagged, Compiler(config=config), keyframes=keyframes)
    except ParseError as exc:
        location = f" (line {exc.line}, column {exc.column})" if exc.line and exc.line > 0 else ""
        click.echo(f"Parse error{location}: {exc}", err=True)
    except NotAStyledTemplateError as exc:
        click.echo(f"Error: {exc}", err=True)
    except CompileError as exc:
        click.echo(f"Compile error [{type(exc).__name__}]: {exc}", err=True)
    sys.exit(1)
