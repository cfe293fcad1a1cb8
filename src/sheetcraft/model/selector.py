"""Selectors: how a style declaration is addressed in the generated sheet."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Union


@dataclass(frozen=True)
class ByKey:
    """Select by an opaque, hashable style key.

    The generated class name is derived from the key, and the key is what
    callers later pass to ``class_of`` / ``layout_of``.
    """

    key: Hashable

    def __post_init__(self) -> None:
        if self.key is None or self.key == "":
            raise ValueError("Style key must not be None or empty")


@dataclass(frozen=True)
class Literal:
    """A raw selector emitted verbatim (e.g. ``body`` or ``a:visited``).

    Literal rules land in the stylesheet but are never reachable by key.
    """

    text: str

    def __post_init__(self) -> None:
        if not self.text.strip():
            raise ValueError("Literal selector text must be non-empty")


Selector = Union[ByKey, Literal]


def key_text(key: Hashable) -> str:
    """Return the text representation used to derive names for *key*.

    Enum members contribute their member name; tuples (parametrised keys such
    as ``("Button", "Primary")``) are joined with ``-``.
    """
    if isinstance(key, Enum):
        return key.name
    if isinstance(key, tuple):
        return "-".join(key_text(part) for part in key)
    return str(key)
