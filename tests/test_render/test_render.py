"""Tests for the default CSS rule renderer."""

import math

import pytest

from sheetcraft.model import (
    Animation,
    BackgroundImage,
    BoxProp,
    ByKey,
    Color,
    ColorProp,
    Filter,
    Filters,
    FlexLayout,
    Float,
    Group,
    Inline,
    Keyframe,
    LayoutStyleDeclaration,
    Literal,
    Position,
    PositionParent,
    Prop,
    Shadow,
    Shadows,
    Spacing,
    StyleDeclaration,
    SubElement,
    TableLayout,
    TextLayout,
    Transform,
    Transforms,
    Transition,
    Visibility,
)
from sheetcraft.render import CssRuleRenderer, class_token, selector_name


def _render(*props, key="Card"):
    return CssRuleRenderer().render(StyleDeclaration(ByKey(key), tuple(props)))


def _layout(*layouts, key="Nav"):
    return CssRuleRenderer().render(LayoutStyleDeclaration(ByKey(key), tuple(layouts)))


# ---------------------------------------------------------------------------
# Names
# ---------------------------------------------------------------------------


class TestClassToken:
    def test_camel_case(self):
        assert class_token("PrimaryButton") == "primary-button"

    def test_invalid_characters_collapse(self):
        assert class_token("Nav Bar!!Item") == "nav-bar-item"

    def test_leading_digit_prefixed(self):
        assert class_token("42") == "s-42"

    def test_empty(self):
        assert class_token("!!!") == "s"


class TestSelectorName:
    def test_by_key(self):
        assert selector_name(ByKey("Card")) == "card"

    def test_suffix(self):
        assert selector_name(ByKey("Card"), "-layout") == "card-layout"

    def test_literal_named_outside_class_tokens(self):
        assert selector_name(Literal("body > main")) == "literal:body > main"

    def test_literal_layout_suffix(self):
        assert selector_name(Literal("main"), "-layout") == "literal-layout:main"

    def test_literal_never_matches_key(self):
        assert selector_name(Literal("body")) != selector_name(ByKey("body"))

    def test_tuple_key(self):
        assert selector_name(ByKey(("Button", "Primary"))) == "button-primary"


# ---------------------------------------------------------------------------
# Style rules
# ---------------------------------------------------------------------------


class TestStyleRule:
    def test_plain_props(self):
        rule = _render(Prop("color", "red"), Prop("font-size", "12px"))
        assert rule.name == "card"
        assert rule.text == ".card {\n  color: red;\n  font-size: 12px;\n}"

    def test_empty_style(self):
        assert _render().text == ".card {}"

    def test_literal_selector(self):
        rule = CssRuleRenderer().render(
            StyleDeclaration(Literal("body"), (Prop("margin", "0"),))
        )
        assert rule.name == "literal:body"
        assert rule.text == "body {\n  margin: 0;\n}"

    def test_name_ignores_properties(self):
        a = _render(Prop("color", "red"))
        b = _render(Prop("color", "blue"))
        assert a.name == b.name
        assert a.text != b.text

    def test_deterministic(self):
        props = (Prop("color", "red"), SubElement(":hover", (Prop("color", "blue"),)))
        assert _render(*props) == _render(*props)

    def test_groups_inlined(self):
        rule = _render(Prop("a", "1"), Group((Prop("b", "2"), Group((Prop("c", "3"),)))))
        assert rule.text == ".card {\n  a: 1;\n  b: 2;\n  c: 3;\n}"


class TestDeclarations:
    def test_color(self):
        rule = _render(ColorProp("color", Color(1, 2, 3)))
        assert "color: rgba(1, 2, 3, 1);" in rule.text

    def test_box(self):
        rule = _render(BoxProp("padding", 1, 2, 3, 4))
        assert "padding: 1px 2px 3px 4px;" in rule.text

    def test_position(self):
        rule = _render(Position(anchor=("bottom", "right"), x=5, y=10))
        assert "bottom: 10px;\n  right: 5px;" in rule.text

    @pytest.mark.parametrize(
        "kind, expected",
        [("current", "relative"), ("parent", "absolute"), ("screen", "fixed")],
    )
    def test_position_parent(self, kind, expected):
        assert f"position: {expected};" in _render(PositionParent(kind)).text

    def test_visibility(self):
        assert "display: none;" in _render(Visibility("hidden")).text
        assert "visibility: hidden;" in _render(Visibility("invisible")).text
        assert "opacity: 0.25;" in _render(Visibility("transparent", 0.75)).text

    def test_background_image(self):
        text = _render(BackgroundImage("img.png", (1, 2))).text
        assert "background-image: url('img.png');" in text
        assert "background-position: 1px 2px;" in text
        assert "background-repeat: no-repeat;" in text

    def test_shadows_split_by_kind(self):
        black = Color(0, 0, 0)
        text = _render(
            Shadows((
                Shadow("box", (1, 2), 3, 4, black),
                Shadow("inset", (0, 0), 1, 0, black),
                Shadow("text", (1, 1), 2, 0, black),
            ))
        ).text
        assert (
            "box-shadow: 1px 2px 3px 4px rgba(0, 0, 0, 1), "
            "inset 0px 0px 1px 0px rgba(0, 0, 0, 1);"
        ) in text
        assert "text-shadow: 1px 1px 2px rgba(0, 0, 0, 1);" in text

    def test_transforms(self):
        text = _render(
            Transforms((Transform("translate", (10, 5)), Transform("rotate", (0.5,)),
                        Transform("scale", (2,))))
        ).text
        assert "transform: translate(10px, 5px) rotate(0.5rad) scale(2);" in text

    def test_filters(self):
        text = _render(Filters((Filter("blur", 2, "px"), Filter("opacity", 50, "%")))).text
        assert "filter: blur(2px) opacity(50%);" in text

    def test_transition(self):
        text = _render(Transition(("opacity", "color"), 200, "linear", 0)).text
        assert "transition: opacity 200ms linear 0ms, color 200ms linear 0ms;" in text

    def test_float(self):
        assert "float: right;" in _render(Float("right")).text


class TestSubElements:
    def test_hover_block_follows_main(self):
        rule = _render(Prop("color", "red"), SubElement(":hover", (Prop("color", "blue"),)))
        assert rule.text == (
            ".card {\n  color: red;\n}\n.card:hover {\n  color: blue;\n}"
        )

    def test_nested_pseudo(self):
        inner = SubElement("::after", (Prop("content", "''"),))
        rule = _render(SubElement(":hover", (inner,)))
        assert ".card:hover::after {\n  content: '';\n}" in rule.text


class TestAnimation:
    def _animation(self, repeat=math.inf):
        return Animation(
            duration=1000,
            easing="ease-in",
            repeat=repeat,
            steps=(
                Keyframe(0, (Prop("opacity", "0"),)),
                Keyframe(100, (Prop("opacity", "1"),)),
            ),
        )

    def test_keyframes_block(self):
        text = _render(self._animation()).text
        assert "@keyframes card-anim-" in text
        assert "  0% { opacity: 0; }\n  100% { opacity: 1; }" in text

    def test_animation_property(self):
        text = _render(self._animation()).text
        assert "ms ease-in infinite;" in text
        assert "animation: card-anim-" in text

    def test_finite_repeat(self):
        assert "1000ms ease-in 3;" in _render(self._animation(repeat=3)).text

    def test_keyframes_name_is_stable(self):
        assert _render(self._animation()).text == _render(self._animation()).text


# ---------------------------------------------------------------------------
# Layout rules
# ---------------------------------------------------------------------------


class TestLayoutRule:
    def test_layout_suffix(self):
        rule = _layout(TextLayout())
        assert rule.name == "nav-layout"
        assert rule.text == ".nav-layout {\n  display: block;\n}"

    def test_custom_suffix(self):
        rule = CssRuleRenderer(layout_suffix="-l").render(
            LayoutStyleDeclaration(ByKey("Nav"), (TableLayout(),))
        )
        assert rule.name == "nav-l"

    def test_row(self):
        text = _layout(FlexLayout("right", False, "center", "top")).text
        assert text == (
            ".nav-layout {\n"
            "  display: flex;\n"
            "  flex-direction: row;\n"
            "  flex-wrap: nowrap;\n"
            "  justify-content: center;\n"
            "  align-items: flex-start;\n"
            "}"
        )

    def test_column_swaps_axes(self):
        text = _layout(FlexLayout("down", True, "right", "justify")).text
        assert "flex-direction: column;" in text
        assert "flex-wrap: wrap;" in text
        assert "justify-content: space-between;" in text
        assert "align-items: flex-end;" in text

    def test_inline_after_flex(self):
        text = _layout(FlexLayout(), Inline()).text
        assert text.index("display: flex;") < text.index("display: inline-flex;")

    def test_inline_before_kind(self):
        text = _layout(Inline(), TableLayout()).text
        assert text.endswith("display: inline-table;\n}")

    def test_literal_layout(self):
        rule = CssRuleRenderer().render(
            LayoutStyleDeclaration(Literal("main"), (FlexLayout(),))
        )
        assert rule.name == "literal-layout:main"
        assert rule.text.startswith("main {\n  display: flex;")

    def test_spacing_child_block(self):
        text = _layout(Spacing(1, 2, 3, 4)).text
        assert text == ".nav-layout {}\n.nav-layout > * {\n  margin: 1px 2px 3px 4px;\n}"


class TestRendererErrors:
    def test_unknown_model(self):
        with pytest.raises(TypeError):
            CssRuleRenderer().render(object())  # type: ignore[arg-type]
