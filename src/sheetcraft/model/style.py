"""Style declarations: the units a caller hands to the renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

from sheetcraft.model.layout import LayoutDeclaration
from sheetcraft.model.options import RenderOption
from sheetcraft.model.property import PropertyDeclaration
from sheetcraft.model.selector import Selector

if TYPE_CHECKING:
    from sheetcraft.model.output import StylesheetOutput


@dataclass(frozen=True)
class StyleDeclaration:
    """One style rule: a selector plus its authored property declarations."""

    selector: Selector
    properties: tuple[PropertyDeclaration, ...] = ()


@dataclass(frozen=True)
class LayoutStyleDeclaration:
    """A layout rule: a selector plus its layout declarations."""

    selector: Selector
    properties: tuple[LayoutDeclaration, ...] = ()


Model = Union[StyleDeclaration, LayoutStyleDeclaration]


@dataclass(frozen=True)
class Sheet:
    """A complete stylesheet description: models plus render options."""

    models: tuple[Model, ...]
    options: tuple[RenderOption, ...] = ()

    def render(self, **kwargs: Any) -> "StylesheetOutput":
        """Render this sheet; keyword arguments go to ``render_stylesheet``."""
        from sheetcraft.pipeline import render_stylesheet

        return render_stylesheet(self.options, self.models, **kwargs)
