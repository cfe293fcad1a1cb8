"""Convenience constructors for declarations.

These are thin, pure wrappers over the model dataclasses so that styles
read naturally::

    style(Class.Button,
          font_family("Open Sans", "sans-serif"),
          padding(4, 8, 4, 8),
          hover(color("background-color", rgba(0, 0, 0, 0.1))))
"""

from __future__ import annotations

import math
from typing import Hashable

from sheetcraft.model.layout import (
    FlexLayout,
    Inline,
    LayoutDeclaration,
    Spacing,
    TableLayout,
    TextLayout,
)
from sheetcraft.model.property import (
    Animation,
    BackgroundImage,
    BoxProp,
    ColorProp,
    Filters,
    Float,
    Group,
    Keyframe,
    LengthProp,
    Position,
    PositionParent,
    Prop,
    PropertyDeclaration,
    Shadows,
    SubElement,
    Transforms,
    Transition,
    Visibility,
)
from sheetcraft.model.selector import ByKey, Literal, Selector
from sheetcraft.model.style import LayoutStyleDeclaration, StyleDeclaration
from sheetcraft.model.values import Color, Filter, Length, Shadow, Transform

# ---------------------------------------------------------------------------
# Styles and selectors
# ---------------------------------------------------------------------------


def _selector(target: Hashable | Selector) -> Selector:
    if isinstance(target, (ByKey, Literal)):
        return target
    return ByKey(target)


def style(target: Hashable | Selector, *properties: PropertyDeclaration) -> StyleDeclaration:
    """Declare a style for a key (or an explicit selector)."""
    return StyleDeclaration(selector=_selector(target), properties=properties)


def layout_style(
    target: Hashable | Selector, *layouts: LayoutDeclaration
) -> LayoutStyleDeclaration:
    return LayoutStyleDeclaration(selector=_selector(target), properties=layouts)


def literal(text: str) -> Literal:
    """A raw selector such as ``"body"``, emitted as written."""
    return Literal(text)


def mix(*properties: PropertyDeclaration) -> Group:
    """Bundle declarations so one style can include another's."""
    return Group(properties)


# ---------------------------------------------------------------------------
# Plain values
# ---------------------------------------------------------------------------


def prop(name: str, value: str) -> Prop:
    return Prop(name, value)


def rgba(red: int, green: int, blue: int, alpha: float = 1.0) -> Color:
    return Color(red, green, blue, alpha)


def color(name: str, value: Color) -> ColorProp:
    return ColorProp(name, value)


def px(value: float) -> Length:
    return Length(value, "px")


def percent(value: float) -> Length:
    return Length(value, "%")


def length(name: str, value: Length) -> LengthProp:
    return LengthProp(name, value)


def font_family(*names: str) -> Prop:
    """``font-family`` with multi-word names quoted."""
    quoted = [f"'{name}'" if " " in name else name for name in names]
    return Prop("font-family", ", ".join(quoted))


def padding(top: float, right: float, bottom: float, left: float) -> BoxProp:
    return BoxProp("padding", top, right, bottom, left)


def margin(top: float, right: float, bottom: float, left: float) -> BoxProp:
    return BoxProp("margin", top, right, bottom, left)


def border_width(top: float, right: float, bottom: float, left: float) -> BoxProp:
    return BoxProp("border-width", top, right, bottom, left)


# ---------------------------------------------------------------------------
# Position and visibility
# ---------------------------------------------------------------------------


def position(x: float = 0, y: float = 0, anchor: tuple[str, str] = ("top", "left")) -> Position:
    return Position(anchor=anchor, x=x, y=y)


def screen() -> PositionParent:
    """Position relative to the viewport."""
    return PositionParent("screen")


def parent() -> PositionParent:
    return PositionParent("parent")


def hidden() -> Visibility:
    return Visibility("hidden")


def invisible() -> Visibility:
    return Visibility("invisible")


def opacity(value: float) -> Visibility:
    """Opacity from 0 (transparent) to 1 (opaque)."""
    return Visibility("transparent", amount=1.0 - value)


def float_left() -> Float:
    return Float("left")


def float_right() -> Float:
    return Float("right")


def background_image(
    src: str, position: tuple[float, float] = (0, 0), repeat: str = "no-repeat"
) -> BackgroundImage:
    return BackgroundImage(src=src, position=position, repeat=repeat)


# ---------------------------------------------------------------------------
# Shadows, transforms, filters
# ---------------------------------------------------------------------------


def box_shadow(
    offset: tuple[float, float], blur: float, size: float, shade: Color, inset: bool = False
) -> Shadow:
    return Shadow("inset" if inset else "box", offset, blur, size, shade)


def text_shadow(offset: tuple[float, float], blur: float, shade: Color) -> Shadow:
    return Shadow("text", offset, blur, 0, shade)


def shadows(*items: Shadow) -> Shadows:
    return Shadows(items)


def translate(x: float, y: float, z: float | None = None) -> Transform:
    values = (x, y) if z is None else (x, y, z)
    return Transform("translate", values)


def rotate(radians: float) -> Transform:
    return Transform("rotate", (radians,))


def scale(x: float, y: float | None = None) -> Transform:
    return Transform("scale", (x,) if y is None else (x, y))


def transforms(*items: Transform) -> Transforms:
    return Transforms(items)


def blur(amount: float) -> Filter:
    return Filter("blur", amount, "px")


def opacity_filter(amount: float) -> Filter:
    return Filter("opacity", amount, "%")


def filters(*items: Filter) -> Filters:
    return Filters(items)


# ---------------------------------------------------------------------------
# Motion
# ---------------------------------------------------------------------------


def transition(
    *properties: str, duration: float = 300, easing: str = "ease", delay: float = 0
) -> Transition:
    return Transition(properties or ("all",), duration, easing, delay)


def animate(
    duration: float,
    easing: str,
    steps: list[tuple[float, list[PropertyDeclaration]]],
    repeat: float = math.inf,
) -> Animation:
    """Keyframe animation from ``(percent, declarations)`` steps."""
    frames = tuple(Keyframe(percent, tuple(props)) for percent, props in steps)
    return Animation(duration=duration, easing=easing, repeat=repeat, steps=frames)


# ---------------------------------------------------------------------------
# Sub-elements
# ---------------------------------------------------------------------------


def pseudo(selector: str, *properties: PropertyDeclaration) -> SubElement:
    """Apply declarations under a pseudo selector, e.g. ``"::after"``."""
    return SubElement(selector, properties)


def hover(*properties: PropertyDeclaration) -> SubElement:
    return SubElement(":hover", properties)


def focus(*properties: PropertyDeclaration) -> SubElement:
    return SubElement(":focus", properties)


# ---------------------------------------------------------------------------
# Layouts
# ---------------------------------------------------------------------------


def text_layout() -> TextLayout:
    return TextLayout()


def table_layout() -> TableLayout:
    return TableLayout()


def row(
    horizontal: str = "left", vertical: str = "top", wrap: bool = False
) -> FlexLayout:
    return FlexLayout(direction="right", wrap=wrap, horizontal=horizontal, vertical=vertical)


def column(
    horizontal: str = "left", vertical: str = "top", wrap: bool = False
) -> FlexLayout:
    return FlexLayout(direction="down", wrap=wrap, horizontal=horizontal, vertical=vertical)


def inline() -> Inline:
    return Inline()


def spacing(top: float, right: float | None = None, bottom: float | None = None,
            left: float | None = None) -> Spacing:
    """Child spacing; a single value applies to all four edges."""
    if right is None:
        return Spacing(top, top, top, top)
    return Spacing(top, right, top if bottom is None else bottom,
                   right if left is None else left)
