"""Sheetcraft: declarative styles compiled into one deduplicated stylesheet."""

__version__ = "0.1.0"

from sheetcraft.config import DEFAULT_CONFIG, SheetConfig  # noqa: E402
from sheetcraft.model import (  # noqa: E402
    AutoImportGoogleFonts,
    BaseStyle,
    ByKey,
    DebugMode,
    Diagnostic,
    ImportRaw,
    ImportUrl,
    LayoutStyleDeclaration,
    Literal,
    Severity,
    Sheet,
    StyleDeclaration,
    StylesheetOutput,
)
from sheetcraft.pipeline import render_sheet, render_stylesheet  # noqa: E402

__all__ = [
    "__version__",
    "render_stylesheet",
    "render_sheet",
    "Sheet",
    "StyleDeclaration",
    "LayoutStyleDeclaration",
    "ByKey",
    "Literal",
    "AutoImportGoogleFonts",
    "ImportRaw",
    "ImportUrl",
    "BaseStyle",
    "DebugMode",
    "StylesheetOutput",
    "Diagnostic",
    "Severity",
    "SheetConfig",
    "DEFAULT_CONFIG",
]
