"""CLI command: sheetcraft render -- compile a sheet to CSS."""

from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path

import click

from sheetcraft.cli.loader import load_sheet
from sheetcraft.errors import SheetLoadError
from sheetcraft.model.options import DebugMode


@click.command()
@click.argument("target")
@click.option(
    "-o", "--output", type=click.Path(dir_okay=False), default=None,
    help="Write the stylesheet to this file instead of stdout.",
)
@click.option("--debug", is_flag=True, help="Render with debug mode enabled.")
def render(target: str, output: str | None, debug: bool) -> None:
    """Render the Sheet at TARGET (module:attribute) to CSS."""
    try:
        sheet = load_sheet(target)
    except SheetLoadError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if debug:
        sheet = replace(sheet, options=(*sheet.options, DebugMode()))

    css_text = sheet.render().css_text
    if output is None:
        click.echo(css_text)
        return

    Path(output).write_text(css_text + "\n", encoding="utf-8")
    click.echo(f"Wrote {len(css_text)} characters to {output}")
