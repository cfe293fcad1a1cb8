"""Option resolution: turn the ordered option list into render settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from sheetcraft.model.layout import LayoutDeclaration, TextLayout
from sheetcraft.model.options import (
    AutoImportGoogleFonts,
    BaseStyle,
    DebugMode,
    ImportRaw,
    ImportUrl,
    RenderOption,
)
from sheetcraft.model.property import Position, PositionParent, Prop, PropertyDeclaration

# Merged into every style unless a BaseStyle option replaces it.
FOUNDATION: tuple[PropertyDeclaration, ...] = (
    Prop("box-sizing", "border-box"),
    Position(anchor=("top", "left"), x=0, y=0),
    PositionParent("current"),
)

LAYOUT_FOUNDATION: tuple[LayoutDeclaration, ...] = (TextLayout(),)

# Outlines floats inside layouts, where they are ignored, and layouts nested
# in inline elements.
DEBUG_CSS = """\
[class$="-layout"] > [class*="float"],
[class*="inline"] > [class$="-layout"] {
  outline: 3px dashed rgba(255, 0, 0, 0.8);
}"""

# Placeholder for the webfont import, which needs every merged style first.
GOOGLE_FONTS_SLOT = object()


@dataclass(frozen=True)
class ResolvedOptions:
    """Render settings derived from an option list.

    ``prelude`` holds rule text in option order, with ``GOOGLE_FONTS_SLOT``
    standing in for the webfont import until fonts have been collected.
    """

    base: tuple[PropertyDeclaration, ...]
    base_layout: tuple[LayoutDeclaration, ...]
    debug: bool
    prelude: tuple[object, ...]

    @property
    def wants_google_fonts(self) -> bool:
        return GOOGLE_FONTS_SLOT in self.prelude

    def prelude_with(self, fonts_import: str | None) -> list[str]:
        """Fill the webfont slot with *fonts_import*, or drop it when ``None``."""
        lines: list[str] = []
        for entry in self.prelude:
            if entry is GOOGLE_FONTS_SLOT:
                if fonts_import:
                    lines.append(fonts_import)
            else:
                lines.append(str(entry))
        return lines


def resolve_options(options: Iterable[RenderOption]) -> ResolvedOptions:
    """Resolve *options* in order.

    The first ``BaseStyle`` wins; later ones are ignored. Repeated
    ``AutoImportGoogleFonts`` or ``DebugMode`` options contribute their
    prelude text once, at their first position.
    """
    base: tuple[PropertyDeclaration, ...] | None = None
    debug = False
    prelude: list[object] = []
    for option in options:
        if isinstance(option, ImportRaw):
            prelude.append(f"@import {option.text};")
        elif isinstance(option, ImportUrl):
            prelude.append(f"@import url('{option.url}');")
        elif isinstance(option, DebugMode):
            if not debug:
                prelude.append(DEBUG_CSS)
            debug = True
        elif isinstance(option, AutoImportGoogleFonts):
            if GOOGLE_FONTS_SLOT not in prelude:
                prelude.append(GOOGLE_FONTS_SLOT)
        elif isinstance(option, BaseStyle):
            if base is None:
                base = tuple(option.properties)
        else:
            raise TypeError(f"Unknown render option: {type(option).__name__}")
    return ResolvedOptions(
        base=FOUNDATION if base is None else base,
        base_layout=LAYOUT_FOUNDATION,
        debug=debug,
        prelude=tuple(prelude),
    )
