"""Tests for the declaration constructor helpers."""

import math

from sheetcraft.model import (
    BoxProp,
    ByKey,
    FlexLayout,
    Group,
    Keyframe,
    Literal,
    Prop,
    Spacing,
    SubElement,
    Visibility,
)
from sheetcraft.properties import (
    animate,
    column,
    font_family,
    hover,
    literal,
    mix,
    opacity,
    padding,
    pseudo,
    row,
    scale,
    spacing,
    style,
    transition,
    translate,
)


class TestStyleConstructors:
    def test_style_wraps_key(self):
        decl = style("Card", Prop("color", "red"))
        assert decl.selector == ByKey("Card")
        assert decl.properties == (Prop("color", "red"),)

    def test_style_accepts_selector(self):
        assert style(literal("body")).selector == Literal("body")

    def test_mix_is_group(self):
        assert mix(Prop("a", "1")) == Group((Prop("a", "1"),))


class TestValueConstructors:
    def test_font_family_quotes_multi_word(self):
        assert font_family("Open Sans", "serif") == Prop("font-family", "'Open Sans', serif")

    def test_padding(self):
        assert padding(1, 2, 3, 4) == BoxProp("padding", 1, 2, 3, 4)

    def test_opacity_is_inverse_transparency(self):
        assert opacity(0.25) == Visibility("transparent", amount=0.75)

    def test_translate_two_or_three_axes(self):
        assert translate(1, 2).values == (1, 2)
        assert translate(1, 2, 3).values == (1, 2, 3)

    def test_scale_uniform(self):
        assert scale(2).values == (2,)

    def test_transition_defaults_to_all(self):
        assert transition().properties == ("all",)
        assert transition("opacity", duration=100).properties == ("opacity",)


class TestSubElementConstructors:
    def test_hover(self):
        assert hover(Prop("a", "1")) == SubElement(":hover", (Prop("a", "1"),))

    def test_pseudo(self):
        assert pseudo("::before", Prop("content", "''")).selector == "::before"


class TestAnimate:
    def test_steps_become_keyframes(self):
        anim = animate(500, "linear", [(0, [Prop("opacity", "0")]), (100, [Prop("opacity", "1")])])
        assert anim.steps[0] == Keyframe(0, (Prop("opacity", "0"),))
        assert anim.repeat == math.inf


class TestLayoutConstructors:
    def test_row_and_column(self):
        assert row() == FlexLayout(direction="right")
        assert column(horizontal="center").direction == "down"

    def test_spacing_single_value(self):
        assert spacing(5) == Spacing(5, 5, 5, 5)

    def test_spacing_two_values(self):
        assert spacing(5, 10) == Spacing(5, 10, 5, 10)
