"""Lookup builder: map style keys to generated class names.

Lookups never fail. An unknown key resolves to a deterministic fallback
name, and under debug mode a ``missing_style`` diagnostic is sent to the
sink first.
"""

from __future__ import annotations

import logging
from typing import Callable, Hashable, Iterable, Mapping

from sheetcraft.config import DEFAULT_CONFIG, SheetConfig
from sheetcraft.model.diagnostic import Diagnostic, Severity
from sheetcraft.model.output import RenderedRule
from sheetcraft.model.selector import key_text
from sheetcraft.render.names import key_class

logger = logging.getLogger(__name__)

DiagnosticSink = Callable[[Diagnostic], None]
ClassLookup = Callable[[Hashable], str]
ClassListLookup = Callable[[Iterable[tuple[Hashable, bool]]], str]


def log_diagnostic(diagnostic: Diagnostic) -> None:
    """Default sink: log the diagnostic at a level matching its severity."""
    if diagnostic.is_error:
        logger.error("%s", diagnostic)
    elif diagnostic.is_warning:
        logger.warning("%s", diagnostic)
    else:
        logger.info("%s", diagnostic)


def fallback_name(key: Hashable, config: SheetConfig = DEFAULT_CONFIG) -> str:
    """The class name returned for a key that has no declared style."""
    return f"{config.missing_prefix}{key_class(key)}"


def missing_style(key: Hashable, kind: str) -> Diagnostic:
    return Diagnostic(
        rule="missing_style",
        severity=Severity.WARNING,
        message=f"No {kind} declared for key {key!r}",
        key=key_text(key),
        fix=f"Declare a {kind} for this key or stop referencing it.",
    )


def build_lookups(
    styles: Mapping[Hashable, RenderedRule],
    layouts: Mapping[Hashable, RenderedRule],
    *,
    debug: bool = False,
    config: SheetConfig = DEFAULT_CONFIG,
    sink: DiagnosticSink = log_diagnostic,
) -> tuple[ClassLookup, ClassListLookup, ClassLookup]:
    """Build ``(class_of, class_list_of, layout_of)`` over the rendered rules.

    The mappings are copied, so later changes to them do not leak into the
    returned functions.
    """
    styles = dict(styles)
    layouts = dict(layouts)

    def resolve(
        table: Mapping[Hashable, RenderedRule], key: Hashable, kind: str
    ) -> RenderedRule | None:
        rule = table.get(key)
        if rule is None and debug:
            sink(missing_style(key, kind))
        return rule

    def class_of(key: Hashable) -> str:
        rule = resolve(styles, key, "style")
        return rule.name if rule is not None else fallback_name(key, config)

    def class_list_of(pairs: Iterable[tuple[Hashable, bool]]) -> str:
        names = []
        for key, include in pairs:
            rule = resolve(styles, key, "style")
            if include and rule is not None:
                names.append(rule.name)
        return " ".join(names)

    def layout_of(key: Hashable) -> str:
        rule = resolve(layouts, key, "layout style")
        return rule.name if rule is not None else fallback_name(key, config)

    return class_of, class_list_of, layout_of
