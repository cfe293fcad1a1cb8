"""CLI command: sheetcraft inspect -- show the names a sheet generates."""

from __future__ import annotations

import sys

import click

from sheetcraft.cli.loader import load_sheet
from sheetcraft.errors import SheetLoadError
from sheetcraft.model.selector import ByKey, key_text
from sheetcraft.model.style import LayoutStyleDeclaration
from sheetcraft.pipeline import collect_font_families, merge_base, resolve_options


@click.command()
@click.argument("target")
def inspect(target: str) -> None:
    """Show each style key of TARGET with its generated class name.

    Also lists literal selectors and the font families that an automatic
    webfont import would request.
    """
    try:
        sheet = load_sheet(target)
    except SheetLoadError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    output = sheet.render()
    resolved = resolve_options(sheet.options)
    merged = merge_base(sheet.models, resolved.base, resolved.base_layout)

    click.echo(f"Models: {len(sheet.models)}")
    click.echo(f"Options: {len(sheet.options)}")
    click.echo()

    click.echo("Styles:")
    for model in sheet.models:
        selector = model.selector
        if isinstance(selector, ByKey):
            name = key_text(selector.key)
            if isinstance(model, LayoutStyleDeclaration):
                click.echo(f"  {name} -> {output.layout_of(selector.key)} (layout)")
            else:
                click.echo(f"  {name} -> {output.class_of(selector.key)}")
        else:
            click.echo(f"  {selector.text} (literal)")
    click.echo()

    families = collect_font_families(merged)
    click.echo("Webfonts: " + (", ".join(families) if families else "(none)"))
