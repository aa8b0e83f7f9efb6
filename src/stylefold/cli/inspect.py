"""CLI command: stylefold inspect -- show every compilation stage."""

from __future__ import annotations

import click

from stylefold.cli.options import build_config, compile_options, load_and_compile
from stylefold.emit import render_output, render_rule
from stylefold.model.segment import ExprSegment, expr_segments


@click.command()
@compile_options
def inspect(
    template_file: str, keyframes: bool, no_prefix: bool, marker_base: int, verbose: bool
) -> None:
    """Compile a tagged template file and display each intermediate stage.

    Markers are shown as <cls> for the class name and <eN> for expressions.
    """
    config = build_config(marker_base, no_prefix)
    call = load_and_compile(template_file, config, keyframes, verbose)
    compilation = call.compilation
    assert compilation is not None
    table = compilation.encoded.table

    click.echo(f"Tag:      {call.tag}")
    click.echo(f"Mode:     {'keyframes' if compilation.keyframe_body else 'rules'}")
    click.echo()

    expressions = len(expr_segments(compilation.segments))
    click.echo(f"Segments ({len(compilation.segments)}, {expressions} expression(s)):")
    expr_index = 0
    for seg in compilation.segments:
        if isinstance(seg, ExprSegment):
            click.echo(f"  <e{expr_index}>  {seg.ref}")
            expr_index += 1
        else:
            click.echo(f"  text  {seg.text!r}")
    click.echo()

    click.echo(f"Flat text:     {table.reveal(compilation.encoded.text)!r}")
    click.echo(f"Processed css: {table.reveal(compilation.css)!r}")
    click.echo()

    click.echo(f"Rule blocks ({len(compilation.blocks)}):")
    for block in compilation.blocks:
        click.echo(f"  {table.reveal(block)}")
    click.echo()

    output = compilation.output
    click.echo(f"Shape:      {output.shape.value}")
    if output.is_function:
        click.echo(f"Parameters: {', '.join(output.parameters)}")
        for slot in output.slots:
            click.echo(f"  {slot.name} = {slot.occurrence.ref}")
    click.echo("Rules:")
    for rule in output.rules:
        click.echo(f"  {render_rule(rule, config)}")
    click.echo()
    click.echo(f"Template:   {render_output(output, config)}")
