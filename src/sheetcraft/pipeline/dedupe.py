from __future__ import annotations

from typing import Iterable

from sheetcraft.model.output import RenderedRule


def dedupe_rules(rules: Iterable[RenderedRule]) -> list[RenderedRule]:
    """Keep the first rule for each name, in first-occurrence order.

    Rules are compared by name only; a later rule with the same name is
    dropped even if its text differs.
    """
    seen: set[str] = set()
    unique: list[RenderedRule] = []
    for rule in rules:
        if rule.name in seen:
            continue
        seen.add(rule.name)
        unique.append(rule)
    return unique
