"""Resolve ``module:attribute`` targets to a Sheet."""

from __future__ import annotations

import importlib
import os
import sys

from sheetcraft.errors import SheetLoadError
from sheetcraft.model.style import Sheet


def load_sheet(target: str) -> Sheet:
    """Import ``module:attribute`` and return the Sheet it names.

    The attribute may be a Sheet or a zero-argument callable returning one.
    The current directory is importable so local modules can be targeted.
    """
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise SheetLoadError(target, "expected 'module:attribute'")

    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise SheetLoadError(target, str(exc)) from exc

    try:
        value = getattr(module, attr)
    except AttributeError as exc:
        raise SheetLoadError(target, f"module has no attribute {attr!r}") from exc

    if callable(value) and not isinstance(value, Sheet):
        value = value()
    if not isinstance(value, Sheet):
        raise SheetLoadError(target, f"expected a Sheet, got {type(value).__name__}")
    return value
