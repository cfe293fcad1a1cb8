"""Render options controlling imports, the base style and debug output."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from sheetcraft.model.property import PropertyDeclaration


@dataclass(frozen=True)
class AutoImportGoogleFonts:
    """Import every non-standard font family used by the sheet."""


@dataclass(frozen=True)
class ImportRaw:
    """Emit ``@import <text>;`` verbatim."""

    text: str


@dataclass(frozen=True)
class ImportUrl:
    url: str


@dataclass(frozen=True)
class BaseStyle:
    """Replace the foundation properties merged into every style."""

    properties: tuple[PropertyDeclaration, ...]


@dataclass(frozen=True)
class DebugMode:
    """Warn on missing style lookups and add the debug CSS to the prelude."""


RenderOption = Union[AutoImportGoogleFonts, ImportRaw, ImportUrl, BaseStyle, DebugMode]
