from __future__ import annotations

from dataclasses import dataclass

STANDARD_FONTS = frozenset({
    "arial",
    "sans-serif",
    "serif",
    "courier",
    "times",
    "times new roman",
    "verdana",
    "tahoma",
    "georgia",
    "helvetica",
})


@dataclass(frozen=True)
class SheetConfig:
    google_fonts_url: str = "https://fonts.googleapis.com/css?family="
    font_join_char: str = "+"  # replaces spaces inside a family name
    standard_fonts: frozenset[str] = STANDARD_FONTS  # lower-case, never imported
    missing_prefix: str = "missing-style-"
    layout_suffix: str = "-layout"


DEFAULT_CONFIG = SheetConfig()
