"""Validation rules for stylesheets.

Each rule takes the option list, the model list and the render config, and
returns a list of Diagnostic objects. None of these affect rendering; they
report what the renderer will silently resolve.
"""

from __future__ import annotations

from typing import Callable, Sequence

from sheetcraft.config import SheetConfig
from sheetcraft.model.diagnostic import Diagnostic, Severity
from sheetcraft.model.options import BaseStyle, RenderOption
from sheetcraft.model.property import Group
from sheetcraft.model.selector import ByKey, Literal, Selector, key_text
from sheetcraft.model.style import LayoutStyleDeclaration, Model, StyleDeclaration
from sheetcraft.render.names import selector_name

RuleFunc = Callable[
    [Sequence[RenderOption], Sequence[Model], SheetConfig], list[Diagnostic]
]


def _kind(model: Model) -> str:
    return "layout style" if isinstance(model, LayoutStyleDeclaration) else "style"


def _describe(selector: Selector) -> str:
    if isinstance(selector, Literal):
        return f"selector {selector.text!r}"
    return f"key {selector.key!r}"


def _key(selector: Selector) -> str | None:
    return key_text(selector.key) if isinstance(selector, ByKey) else None


def _rule_name(model: Model, config: SheetConfig) -> str:
    suffix = config.layout_suffix if isinstance(model, LayoutStyleDeclaration) else ""
    return selector_name(model.selector, suffix)


# ---------------------------------------------------------------------------
# WARNING rules
# ---------------------------------------------------------------------------


def check_duplicate_keys(
    options: Sequence[RenderOption], models: Sequence[Model], config: SheetConfig
) -> list[Diagnostic]:
    """A selector should be declared once per kind; later declarations are unused."""
    seen: set[tuple[str, Selector]] = set()
    diagnostics: list[Diagnostic] = []
    for model in models:
        marker = (_kind(model), model.selector)
        if marker in seen:
            diagnostics.append(
                Diagnostic(
                    rule="check_duplicate_keys",
                    severity=Severity.WARNING,
                    message=(
                        f"{_kind(model).capitalize()} {_describe(model.selector)} is "
                        "declared more than once; only the first declaration is used."
                    ),
                    key=_key(model.selector),
                    fix="Merge the declarations, or share properties with mix().",
                )
            )
        seen.add(marker)
    return diagnostics


def check_multiple_base_styles(
    options: Sequence[RenderOption], models: Sequence[Model], config: SheetConfig
) -> list[Diagnostic]:
    """Only the first BaseStyle option is honoured."""
    count = sum(1 for option in options if isinstance(option, BaseStyle))
    if count <= 1:
        return []
    return [
        Diagnostic(
            rule="check_multiple_base_styles",
            severity=Severity.WARNING,
            message=f"{count} base-style options given; only the first is used.",
            fix="Combine the base styles into a single BaseStyle option.",
        )
    ]


def check_name_collisions(
    options: Sequence[RenderOption], models: Sequence[Model], config: SheetConfig
) -> list[Diagnostic]:
    """Different selectors that produce the same rule name shadow one another.

    Names are computed with *config*'s layout suffix, as the renderer
    would compute them.
    """
    owners: dict[str, Selector] = {}
    diagnostics: list[Diagnostic] = []
    for model in models:
        name = _rule_name(model, config)
        owner = owners.setdefault(name, model.selector)
        if owner != model.selector:
            diagnostics.append(
                Diagnostic(
                    rule="check_name_collisions",
                    severity=Severity.WARNING,
                    message=(
                        f"{_describe(owner).capitalize()} and {_describe(model.selector)} "
                        f"both render as '{name}'; the later rule is dropped."
                    ),
                    key=_key(model.selector),
                    fix="Rename one of the keys.",
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# INFO rules
# ---------------------------------------------------------------------------


def check_empty_styles(
    options: Sequence[RenderOption], models: Sequence[Model], config: SheetConfig
) -> list[Diagnostic]:
    """Declarations with no properties only carry the base style."""
    diagnostics: list[Diagnostic] = []
    for model in models:
        if model.properties:
            continue
        diagnostics.append(
            Diagnostic(
                rule="check_empty_styles",
                severity=Severity.INFO,
                message=f"{_kind(model).capitalize()} has no properties of its own.",
                key=_key(model.selector),
            )
        )
    return diagnostics


def check_nested_groups(
    options: Sequence[RenderOption], models: Sequence[Model], config: SheetConfig
) -> list[Diagnostic]:
    """Groups inside groups are flattened, which can hide where a value came from."""
    diagnostics: list[Diagnostic] = []
    for model in models:
        if not isinstance(model, StyleDeclaration):
            continue
        nested = any(
            isinstance(inner, Group)
            for prop in model.properties
            if isinstance(prop, Group)
            for inner in prop.properties
        )
        if nested:
            diagnostics.append(
                Diagnostic(
                    rule="check_nested_groups",
                    severity=Severity.INFO,
                    message="Style mixes in a group that itself contains groups.",
                    key=_key(model.selector),
                )
            )
    return diagnostics


ALL_RULES: list[RuleFunc] = [
    check_duplicate_keys,
    check_multiple_base_styles,
    check_name_collisions,
    check_empty_styles,
    check_nested_groups,
]
