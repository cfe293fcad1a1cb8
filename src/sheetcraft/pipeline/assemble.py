from __future__ import annotations

from typing import Iterable

from sheetcraft.model.output import RenderedRule


def assemble(prelude: list[str], rules: Iterable[RenderedRule]) -> str:
    """Join prelude lines and rule text into the final stylesheet."""
    body = "\n".join(rule.text for rule in rules)
    if not prelude:
        return body
    return "\n".join(prelude) + "\n\n" + body
