"""Base protocol for rule renderers."""

from __future__ import annotations

from typing import Protocol

from sheetcraft.model.output import RenderedRule
from sheetcraft.model.style import Model


class Renderer(Protocol):
    """Turns one declaration into a named rule.

    Implementations must be deterministic, and the name must be a valid
    class token.
    """

    def render(self, model: Model) -> RenderedRule: ...
