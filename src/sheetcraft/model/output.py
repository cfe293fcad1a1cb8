"""Render outputs: individual rendered rules and the final sheet."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Hashable, Iterable


@dataclass(frozen=True)
class RenderedRule:
    """A rule as rendered: its generated class name and full CSS text."""

    name: str
    text: str


@dataclass(frozen=True)
class StylesheetOutput:
    """The compiled stylesheet plus lookups from style keys to class names.

    Attributes:
        css_text: The complete stylesheet, ready to embed in a ``<style>`` tag.
        class_of: Key -> class name (falls back to a ``missing-style-`` name).
        class_list_of: ``[(key, include), ...]`` -> space-joined class names.
        layout_of: Layout key -> class name, with the same fallback as ``class_of``.
    """

    css_text: str
    class_of: Callable[[Hashable], str]
    class_list_of: Callable[[Iterable[tuple[Hashable, bool]]], str]
    layout_of: Callable[[Hashable], str]

    def __str__(self) -> str:
        return self.css_text
