"""Derive class tokens from style keys."""

from __future__ import annotations

import re
from typing import Hashable

from sheetcraft.model.selector import ByKey, Literal, Selector, key_text

_CAMEL_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_INVALID_RE = re.compile(r"[^a-z0-9_-]+")


def class_token(text: str) -> str:
    """Turn arbitrary text into a CSS class token.

    ``"PrimaryButton"`` becomes ``"primary-button"``; anything outside
    ``[a-z0-9_-]`` collapses to a single hyphen.
    """
    token = _CAMEL_RE.sub("-", text).lower()
    token = _INVALID_RE.sub("-", token).strip("-")
    if not token:
        return "s"
    if token[0].isdigit():
        return f"s-{token}"
    return token


def key_class(key: Hashable) -> str:
    return class_token(key_text(key))


def selector_name(selector: Selector, suffix: str = "") -> str:
    """Name a rendered rule.

    Literal rules are named ``literal<suffix>:<text>``. The colon never occurs
    in a class token, so a literal rule cannot share a name with a keyed rule,
    and the suffix keeps literal styles and literal layouts apart.
    """
    if isinstance(selector, Literal):
        return f"literal{suffix}:{selector.text}"
    if isinstance(selector, ByKey):
        return key_class(selector.key) + suffix
    raise TypeError(f"Unknown selector type: {type(selector).__name__}")


def selector_text(selector: Selector, name: str) -> str:
    if isinstance(selector, Literal):
        return selector.text
    return f".{name}"
