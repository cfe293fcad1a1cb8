"""Property declarations: the closed set of things a style can say.

Every variant is an immutable dataclass. ``Group`` only exists while authoring;
the pipeline flattens it away before rendering.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Union

from sheetcraft.model.values import Color, Filter, Length, Shadow, Transform

_VERTICAL_ANCHORS = ("top", "bottom")
_HORIZONTAL_ANCHORS = ("left", "right")


@dataclass(frozen=True)
class Prop:
    """A plain ``name: value`` pair."""

    name: str
    value: str


@dataclass(frozen=True)
class ColorProp:
    name: str
    color: Color


@dataclass(frozen=True)
class LengthProp:
    name: str
    length: Length


@dataclass(frozen=True)
class BoxProp:
    """A four-edge value (top, right, bottom, left) in pixels."""

    name: str
    top: float
    right: float
    bottom: float
    left: float


@dataclass(frozen=True)
class Position:
    """Offset an element from an anchor corner, e.g. ``("top", "left")``."""

    anchor: tuple[str, str] = ("top", "left")
    x: float = 0
    y: float = 0

    def __post_init__(self) -> None:
        vertical, horizontal = self.anchor
        if vertical not in _VERTICAL_ANCHORS or horizontal not in _HORIZONTAL_ANCHORS:
            raise ValueError(f"Invalid anchor: {self.anchor!r}")


@dataclass(frozen=True)
class PositionParent:
    """What a ``Position`` is relative to: ``current``, ``parent`` or ``screen``."""

    kind: str = "current"

    def __post_init__(self) -> None:
        if self.kind not in ("current", "parent", "screen"):
            raise ValueError(f"Unknown position parent: {self.kind!r}")


@dataclass(frozen=True)
class Visibility:
    """``visible``, ``hidden``, ``invisible`` or ``transparent`` (with amount)."""

    kind: str
    amount: float = 0.0

    def __post_init__(self) -> None:
        if self.kind not in ("visible", "hidden", "invisible", "transparent"):
            raise ValueError(f"Unknown visibility: {self.kind!r}")
        if not 0.0 <= self.amount <= 1.0:
            raise ValueError(f"Transparency out of range: {self.amount}")


@dataclass(frozen=True)
class BackgroundImage:
    src: str
    position: tuple[float, float] = (0, 0)
    repeat: str = "no-repeat"


@dataclass(frozen=True)
class Shadows:
    shadows: tuple[Shadow, ...]


@dataclass(frozen=True)
class Transforms:
    transforms: tuple[Transform, ...]


@dataclass(frozen=True)
class Filters:
    filters: tuple[Filter, ...]


@dataclass(frozen=True)
class Transition:
    """Transition for the named CSS properties; times in milliseconds."""

    properties: tuple[str, ...] = ("all",)
    duration: float = 300
    easing: str = "ease"
    delay: float = 0

    def __post_init__(self) -> None:
        if self.duration < 0 or self.delay < 0:
            raise ValueError("Transition times must be non-negative")


@dataclass(frozen=True)
class Keyframe:
    """One animation step at *percent* of the timeline."""

    percent: float
    properties: tuple["PropertyDeclaration", ...]

    def __post_init__(self) -> None:
        if not 0 <= self.percent <= 100:
            raise ValueError(f"Keyframe percent out of range: {self.percent}")
        for prop in leaves(self.properties):
            if isinstance(prop, (SubElement, Animation)):
                raise ValueError("Keyframes may only contain plain declarations")


@dataclass(frozen=True)
class Animation:
    """Keyframe animation. ``repeat`` may be ``math.inf``."""

    duration: float
    easing: str
    repeat: float
    steps: tuple[Keyframe, ...]

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError("Animation duration must be non-negative")
        if math.isnan(self.repeat) or self.repeat < 0:
            raise ValueError(f"Invalid repeat count: {self.repeat}")


@dataclass(frozen=True)
class SubElement:
    """Properties applied under a pseudo selector such as ``:hover``."""

    selector: str
    properties: tuple["PropertyDeclaration", ...]


@dataclass(frozen=True)
class Float:
    side: str

    def __post_init__(self) -> None:
        if self.side not in _HORIZONTAL_ANCHORS:
            raise ValueError(f"Float side must be left or right, got {self.side!r}")


@dataclass(frozen=True)
class Group:
    """Declarations spliced in place; lets one style include another."""

    properties: tuple["PropertyDeclaration", ...]


PropertyDeclaration = Union[
    Prop,
    ColorProp,
    LengthProp,
    BoxProp,
    Position,
    PositionParent,
    Visibility,
    BackgroundImage,
    Shadows,
    Transforms,
    Filters,
    Transition,
    Animation,
    SubElement,
    Float,
    Group,
]


def leaves(properties: Iterable[PropertyDeclaration]) -> Iterator[PropertyDeclaration]:
    """Yield declarations in order with every ``Group`` spliced in place."""
    for prop in properties:
        if isinstance(prop, Group):
            yield from leaves(prop.properties)
        else:
            yield prop
