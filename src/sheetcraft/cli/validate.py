"""CLI command: sheetcraft validate -- check a sheet's declarations."""

from __future__ import annotations

import sys

import click

from sheetcraft.cli.loader import load_sheet
from sheetcraft.errors import SheetLoadError
from sheetcraft.model.diagnostic import Severity
from sheetcraft.validation import validate_sheet


@click.command()
@click.argument("target")
def validate(target: str) -> None:
    """Validate the Sheet at TARGET (module:attribute).

    Prints diagnostics (errors, warnings, info) and exits with code 0 if
    no errors are found, or code 1 if there are errors.
    """
    try:
        sheet = load_sheet(target)
    except SheetLoadError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    diagnostics = validate_sheet(sheet)

    if not diagnostics:
        click.echo(f"OK: {target} is valid (0 diagnostics)")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info"
    )

    if errors:
        sys.exit(1)
    sys.exit(0)
