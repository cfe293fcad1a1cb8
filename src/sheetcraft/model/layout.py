"""Layout declarations: how a layout style arranges its children."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

_DIRECTIONS = ("up", "down", "left", "right")
_HORIZONTAL = ("left", "right", "center", "justify")
_VERTICAL = ("top", "bottom", "center", "justify")


@dataclass(frozen=True)
class TextLayout:
    """Normal text flow."""


@dataclass(frozen=True)
class TableLayout:
    pass


@dataclass(frozen=True)
class FlexLayout:
    """Directional flex flow.

    Attributes:
        direction: Main axis direction: ``up``, ``down``, ``left`` or ``right``.
        wrap: Whether children wrap onto new lines.
        horizontal: ``left``, ``right``, ``center`` or ``justify``.
        vertical: ``top``, ``bottom``, ``center`` or ``justify``.
    """

    direction: str = "right"
    wrap: bool = False
    horizontal: str = "left"
    vertical: str = "top"

    def __post_init__(self) -> None:
        if self.direction not in _DIRECTIONS:
            raise ValueError(f"Unknown flex direction: {self.direction!r}")
        if self.horizontal not in _HORIZONTAL:
            raise ValueError(f"Unknown horizontal alignment: {self.horizontal!r}")
        if self.vertical not in _VERTICAL:
            raise ValueError(f"Unknown vertical alignment: {self.vertical!r}")

    @property
    def is_horizontal(self) -> bool:
        return self.direction in ("left", "right")


@dataclass(frozen=True)
class Inline:
    """Marks the layout as inline (``inline-block``, ``inline-flex``...)."""


@dataclass(frozen=True)
class Spacing:
    """Space between children as (top, right, bottom, left) pixels."""

    top: float
    right: float
    bottom: float
    left: float


LayoutKind = Union[TextLayout, TableLayout, FlexLayout]
LayoutDeclaration = Union[TextLayout, TableLayout, FlexLayout, Inline, Spacing]
