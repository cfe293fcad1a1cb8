"""Stylesheet validator: run every rule over a sheet's options and models."""

from __future__ import annotations

from typing import Sequence

from sheetcraft.config import DEFAULT_CONFIG, SheetConfig
from sheetcraft.errors import ValidationError
from sheetcraft.model.diagnostic import Diagnostic
from sheetcraft.model.options import RenderOption
from sheetcraft.model.style import Model, Sheet
from sheetcraft.validation.rules import ALL_RULES, RuleFunc


def validate(
    options: Sequence[RenderOption],
    models: Sequence[Model],
    extra_rules: list[RuleFunc] | None = None,
    *,
    config: SheetConfig | None = None,
) -> list[Diagnostic]:
    """Check *models* as they would render with *options* and *config*.

    Pass the same config given to ``render_stylesheet`` so rule names (and
    therefore collisions) match what the renderer produces. Returns every
    diagnostic, in rule order.
    """
    config = config or DEFAULT_CONFIG
    options = list(options)
    models = list(models)
    diagnostics: list[Diagnostic] = []
    for rule in [*ALL_RULES, *(extra_rules or [])]:
        diagnostics.extend(rule(options, models, config))
    return diagnostics


def validate_sheet(sheet: Sheet, *, config: SheetConfig | None = None) -> list[Diagnostic]:
    return validate(sheet.options, sheet.models, config=config)


def validate_or_raise(
    options: Sequence[RenderOption],
    models: Sequence[Model],
    extra_rules: list[RuleFunc] | None = None,
    *,
    config: SheetConfig | None = None,
) -> list[Diagnostic]:
    """Like :func:`validate`, but raise :class:`ValidationError` on ERROR findings.

    No built-in rule reports errors; only *extra_rules* can make this raise.
    """
    diagnostics = validate(options, models, extra_rules, config=config)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise ValidationError(errors)
    return diagnostics
