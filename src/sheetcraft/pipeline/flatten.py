"""Group flattening: splice ``Group`` declarations into their parent list."""

from __future__ import annotations

from typing import Iterable

from sheetcraft.model.property import PropertyDeclaration, leaves


def flatten(properties: Iterable[PropertyDeclaration]) -> tuple[PropertyDeclaration, ...]:
    """Return *properties* with every group replaced by its contents.

    Nested groups are flattened too. Order is otherwise preserved.
    """
    return tuple(leaves(properties))
