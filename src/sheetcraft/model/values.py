"""Value types carried by property declarations."""

from __future__ import annotations

from dataclasses import dataclass


def format_number(value: float) -> str:
    """Format a number for CSS output: ``10`` rather than ``10.0``."""
    if float(value).is_integer():
        return str(int(value))
    return ("%.4f" % value).rstrip("0").rstrip(".")


@dataclass(frozen=True)
class Color:
    """An RGBA colour. Channels are 0-255, alpha is 0-1."""

    red: int
    green: int
    blue: int
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= 255:
                raise ValueError(f"Colour channel out of range: {channel}")
        if not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"Alpha out of range: {self.alpha}")

    def to_css(self) -> str:
        return (
            f"rgba({self.red}, {self.green}, {self.blue}, "
            f"{format_number(self.alpha)})"
        )


@dataclass(frozen=True)
class Length:
    value: float
    unit: str = "px"

    def to_css(self) -> str:
        return f"{format_number(self.value)}{self.unit}"


@dataclass(frozen=True)
class Shadow:
    """A single box or text shadow.

    ``kind`` is one of ``"box"``, ``"inset"`` or ``"text"``.
    """

    kind: str
    offset: tuple[float, float]
    blur: float
    size: float
    color: Color

    def __post_init__(self) -> None:
        if self.kind not in ("box", "inset", "text"):
            raise ValueError(f"Unknown shadow kind: {self.kind!r}")


@dataclass(frozen=True)
class Transform:
    """A transform step: ``translate`` (px), ``rotate`` (rad) or ``scale``."""

    kind: str
    values: tuple[float, ...]

    def __post_init__(self) -> None:
        if self.kind not in ("translate", "rotate", "scale"):
            raise ValueError(f"Unknown transform kind: {self.kind!r}")


@dataclass(frozen=True)
class Filter:
    name: str
    value: float
    unit: str = ""
