"""Error hierarchy for sheetcraft.

Rendering itself never raises for well-formed declarations; these cover
loading sheets from the command line and strict validation.
"""

from __future__ import annotations

from sheetcraft.model.diagnostic import Diagnostic


class SheetcraftError(Exception):
    """Base error for all sheetcraft errors."""


class SheetLoadError(SheetcraftError):
    """A ``module:attribute`` target could not be resolved to a Sheet."""

    def __init__(self, target: str, reason: str) -> None:
        super().__init__(f"Cannot load {target!r}: {reason}")
        self.target = target
        self.reason = reason


class ValidationError(SheetcraftError):
    """Raised when validation produces ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Validation failed with {len(messages)} error(s): " + "; ".join(messages)
        )
