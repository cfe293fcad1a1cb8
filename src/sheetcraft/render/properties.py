"""Serialize single declarations into ``(css-property, value)`` pairs."""

from __future__ import annotations

import math

from sheetcraft.model.layout import FlexLayout, LayoutKind, TableLayout, TextLayout
from sheetcraft.model.property import (
    BackgroundImage,
    BoxProp,
    ColorProp,
    Filters,
    Float,
    LengthProp,
    Position,
    PositionParent,
    Prop,
    Shadows,
    Transforms,
    Transition,
    Visibility,
)
from sheetcraft.model.values import Shadow, Transform, format_number

Pair = tuple[str, str]

_POSITION_MODES = {"current": "relative", "parent": "absolute", "screen": "fixed"}

_FLEX_DIRECTIONS = {
    "right": "row",
    "left": "row-reverse",
    "down": "column",
    "up": "column-reverse",
}

# Main axis alignment (justify-content).
_MAIN_AXIS = {
    "left": "flex-start",
    "top": "flex-start",
    "right": "flex-end",
    "bottom": "flex-end",
    "center": "center",
    "justify": "space-between",
}

# Cross axis alignment (align-items).
_CROSS_AXIS = {
    "left": "flex-start",
    "top": "flex-start",
    "right": "flex-end",
    "bottom": "flex-end",
    "center": "center",
    "justify": "stretch",
}


def _px(value: float) -> str:
    return f"{format_number(value)}px"


def _edges(top: float, right: float, bottom: float, left: float) -> str:
    return " ".join(_px(v) for v in (top, right, bottom, left))


def _shadow(shadow: Shadow) -> str:
    x, y = shadow.offset
    parts = [_px(x), _px(y), _px(shadow.blur)]
    if shadow.kind != "text":
        parts.append(_px(shadow.size))
    parts.append(shadow.color.to_css())
    if shadow.kind == "inset":
        parts.insert(0, "inset")
    return " ".join(parts)


def _transform(transform: Transform) -> str:
    if transform.kind == "translate":
        args = ", ".join(_px(v) for v in transform.values)
    elif transform.kind == "rotate":
        args = ", ".join(f"{format_number(v)}rad" for v in transform.values)
    else:
        args = ", ".join(format_number(v) for v in transform.values)
    return f"{transform.kind}({args})"


def declaration_pairs(prop: object) -> list[Pair]:
    """Return the CSS pairs for a leaf property declaration.

    Groups, sub-elements and animations produce more than pairs and are
    handled by the rule renderer before reaching this function.
    """
    if isinstance(prop, Prop):
        return [(prop.name, prop.value)]
    if isinstance(prop, ColorProp):
        return [(prop.name, prop.color.to_css())]
    if isinstance(prop, LengthProp):
        return [(prop.name, prop.length.to_css())]
    if isinstance(prop, BoxProp):
        return [(prop.name, _edges(prop.top, prop.right, prop.bottom, prop.left))]
    if isinstance(prop, Position):
        vertical, horizontal = prop.anchor
        return [(vertical, _px(prop.y)), (horizontal, _px(prop.x))]
    if isinstance(prop, PositionParent):
        return [("position", _POSITION_MODES[prop.kind])]
    if isinstance(prop, Visibility):
        if prop.kind == "hidden":
            return [("display", "none")]
        if prop.kind == "invisible":
            return [("visibility", "hidden")]
        if prop.kind == "transparent":
            return [("opacity", format_number(1.0 - prop.amount))]
        return [("visibility", "visible")]
    if isinstance(prop, BackgroundImage):
        x, y = prop.position
        return [
            ("background-image", f"url('{prop.src}')"),
            ("background-position", f"{_px(x)} {_px(y)}"),
            ("background-repeat", prop.repeat),
        ]
    if isinstance(prop, Shadows):
        pairs: list[Pair] = []
        box = [_shadow(s) for s in prop.shadows if s.kind != "text"]
        text = [_shadow(s) for s in prop.shadows if s.kind == "text"]
        if box:
            pairs.append(("box-shadow", ", ".join(box)))
        if text:
            pairs.append(("text-shadow", ", ".join(text)))
        return pairs
    if isinstance(prop, Transforms):
        if not prop.transforms:
            return []
        return [("transform", " ".join(_transform(t) for t in prop.transforms))]
    if isinstance(prop, Filters):
        if not prop.filters:
            return []
        value = " ".join(
            f"{f.name}({format_number(f.value)}{f.unit})" for f in prop.filters
        )
        return [("filter", value)]
    if isinstance(prop, Transition):
        value = ", ".join(
            f"{name} {format_number(prop.duration)}ms {prop.easing} "
            f"{format_number(prop.delay)}ms"
            for name in prop.properties
        )
        return [("transition", value)]
    if isinstance(prop, Float):
        return [("float", prop.side)]
    raise TypeError(f"Cannot render declaration of type {type(prop).__name__}")


def iteration_count(repeat: float) -> str:
    return "infinite" if math.isinf(repeat) else format_number(repeat)


def display_value(kind: LayoutKind, inline: bool) -> str:
    if isinstance(kind, FlexLayout):
        display = "flex"
    elif isinstance(kind, TableLayout):
        display = "table"
    elif isinstance(kind, TextLayout):
        display = "block"
    else:
        raise TypeError(f"Unknown layout kind: {type(kind).__name__}")
    return f"inline-{display}" if inline else display


def flex_pairs(layout: FlexLayout) -> list[Pair]:
    if layout.is_horizontal:
        main, cross = layout.horizontal, layout.vertical
    else:
        main, cross = layout.vertical, layout.horizontal
    return [
        ("flex-direction", _FLEX_DIRECTIONS[layout.direction]),
        ("flex-wrap", "wrap" if layout.wrap else "nowrap"),
        ("justify-content", _MAIN_AXIS[main]),
        ("align-items", _CROSS_AXIS[cross]),
    ]


def spacing_value(top: float, right: float, bottom: float, left: float) -> str:
    return _edges(top, right, bottom, left)
