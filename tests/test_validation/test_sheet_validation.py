"""Tests for stylesheet validation rules and the validator."""

import pytest

from sheetcraft.config import DEFAULT_CONFIG, SheetConfig
from sheetcraft.model import (
    BaseStyle,
    Diagnostic,
    Group,
    LayoutStyleDeclaration,
    Literal,
    Prop,
    Severity,
    Sheet,
    StyleDeclaration,
)
from sheetcraft.properties import layout_style, mix, row, style
from sheetcraft.validation import (
    ValidationError,
    validate,
    validate_or_raise,
    validate_sheet,
)
from sheetcraft.validation.rules import (
    check_duplicate_keys,
    check_empty_styles,
    check_multiple_base_styles,
    check_name_collisions,
    check_nested_groups,
)

_NO_SUFFIX = SheetConfig(layout_suffix="")


# ---------------------------------------------------------------------------
# Individual rules
# ---------------------------------------------------------------------------


class TestCheckDuplicateKeys:
    def test_duplicate_style_key(self):
        diags = check_duplicate_keys([], [style("a"), style("a")], DEFAULT_CONFIG)
        assert len(diags) == 1
        assert diags[0].severity is Severity.WARNING
        assert diags[0].key == "a"

    def test_style_and_layout_may_share_key(self):
        models = [style("a"), layout_style("a", row())]
        assert check_duplicate_keys([], models, DEFAULT_CONFIG) == []

    def test_duplicate_literal_selector(self):
        models = [StyleDeclaration(Literal("body")), StyleDeclaration(Literal("body"))]
        diags = check_duplicate_keys([], models, DEFAULT_CONFIG)
        assert len(diags) == 1
        assert diags[0].key is None
        assert "'body'" in diags[0].message

    def test_literal_style_and_layout_may_share_selector(self):
        models = [
            StyleDeclaration(Literal("main")),
            LayoutStyleDeclaration(Literal("main"), ()),
        ]
        assert check_duplicate_keys([], models, DEFAULT_CONFIG) == []


class TestCheckMultipleBaseStyles:
    def test_single_ok(self):
        assert check_multiple_base_styles([BaseStyle(())], [], DEFAULT_CONFIG) == []

    def test_multiple_warns(self):
        diags = check_multiple_base_styles(
            [BaseStyle(()), BaseStyle(())], [], DEFAULT_CONFIG
        )
        assert len(diags) == 1
        assert "only the first" in diags[0].message


class TestCheckNameCollisions:
    def test_distinct_keys_same_class(self):
        diags = check_name_collisions(
            [], [style("NavBar"), style("nav bar")], DEFAULT_CONFIG
        )
        assert len(diags) == 1
        assert "nav-bar" in diags[0].message

    def test_same_key_is_not_a_collision(self):
        assert check_name_collisions([], [style("a"), style("a")], DEFAULT_CONFIG) == []

    def test_literal_and_same_named_key(self):
        models = [StyleDeclaration(Literal("body")), style("body")]
        assert check_name_collisions([], models, DEFAULT_CONFIG) == []

    def test_literal_style_and_layout(self):
        models = [
            StyleDeclaration(Literal("main")),
            LayoutStyleDeclaration(Literal("main"), ()),
        ]
        assert check_name_collisions([], models, DEFAULT_CONFIG) == []

    def test_uses_configured_layout_suffix(self):
        models = [style("nav"), layout_style("nav", row())]
        assert check_name_collisions([], models, DEFAULT_CONFIG) == []
        diags = check_name_collisions([], models, _NO_SUFFIX)
        assert len(diags) == 1
        assert "'nav'" in diags[0].message


class TestCheckEmptyStyles:
    def test_empty_reported_as_info(self):
        models = [style("a"), style("b", Prop("x", "1"))]
        diags = check_empty_styles([], models, DEFAULT_CONFIG)
        assert len(diags) == 1
        assert diags[0].severity is Severity.INFO
        assert diags[0].key == "a"


class TestCheckNestedGroups:
    def test_nested(self):
        model = style("a", mix(mix(Prop("x", "1"))))
        assert len(check_nested_groups([], [model], DEFAULT_CONFIG)) == 1

    def test_single_level(self):
        model = style("a", Group((Prop("x", "1"),)))
        assert check_nested_groups([], [model], DEFAULT_CONFIG) == []


# ---------------------------------------------------------------------------
# Validator
# ---------------------------------------------------------------------------


def _always_error(options, models, config):
    return [Diagnostic(rule="always", severity=Severity.ERROR, message="boom")]


class TestValidator:
    def test_clean_sheet(self):
        assert validate([], [style("a", Prop("x", "1"))]) == []

    def test_collects_from_all_rules(self):
        diags = validate([BaseStyle(()), BaseStyle(())], [style("a"), style("a")])
        rules = {d.rule for d in diags}
        assert {"check_duplicate_keys", "check_multiple_base_styles", "check_empty_styles"} <= rules

    def test_config_reaches_rules(self):
        models = [style("nav", Prop("x", "1")), layout_style("nav", row())]
        assert validate([], models) == []
        diags = validate([], models, config=_NO_SUFFIX)
        assert [d.rule for d in diags] == ["check_name_collisions"]

    def test_extra_rules_receive_config(self):
        seen = []

        def record(options, models, config):
            seen.append(config)
            return []

        validate([], [], extra_rules=[record], config=_NO_SUFFIX)
        assert seen == [_NO_SUFFIX]

    def test_validate_sheet(self):
        sheet = Sheet(
            models=(style("a", Prop("x", "1")), style("a", Prop("x", "2"))),
            options=(BaseStyle(()), BaseStyle(())),
        )
        rules = [d.rule for d in validate_sheet(sheet)]
        assert rules == ["check_duplicate_keys", "check_multiple_base_styles"]

    def test_validate_or_raise_passes_warnings(self):
        diags = validate_or_raise([], [style("a"), style("a")])
        assert all(not d.is_error for d in diags)

    def test_validate_or_raise_raises_on_error(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_or_raise([], [], extra_rules=[_always_error])
        assert len(exc_info.value.diagnostics) == 1
        assert "boom" in str(exc_info.value)
