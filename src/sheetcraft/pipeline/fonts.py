"""Font collection for the automatic webfont import."""

from __future__ import annotations

from typing import Iterable

from sheetcraft.config import DEFAULT_CONFIG, SheetConfig
from sheetcraft.model.property import Prop
from sheetcraft.model.style import Model, StyleDeclaration

_QUOTES = "'\""


def _family_names(value: str) -> list[str]:
    names = []
    for raw in value.split(","):
        name = raw.strip().strip(_QUOTES).strip()
        if name:
            names.append(name)
    return names


def collect_font_families(
    models: Iterable[Model], config: SheetConfig = DEFAULT_CONFIG
) -> list[str]:
    """Return the non-standard font families used by *models*.

    Only top-level ``font-family`` declarations of style models count, so
    *models* should already be merged and flattened. Names keep their
    first-seen order, are de-duplicated, and have internal whitespace
    replaced by ``config.font_join_char``. Standard fonts are matched
    case-insensitively and dropped.
    """
    families: dict[str, None] = {}
    for model in models:
        if not isinstance(model, StyleDeclaration):
            continue
        for prop in model.properties:
            if not isinstance(prop, Prop) or prop.name != "font-family":
                continue
            for name in _family_names(prop.value):
                if name.lower() in config.standard_fonts:
                    continue
                families.setdefault(config.font_join_char.join(name.split()), None)
    return list(families)


def google_fonts_import(
    families: list[str], config: SheetConfig = DEFAULT_CONFIG
) -> str | None:
    """Build a single ``@import`` for *families*, or ``None`` if there are none."""
    if not families:
        return None
    return f"@import url('{config.google_fonts_url}{'|'.join(families)}');"
