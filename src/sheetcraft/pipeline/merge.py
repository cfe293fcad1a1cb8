"""Base merging: prepend the base declarations to every model."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from sheetcraft.model.layout import LayoutDeclaration
from sheetcraft.model.property import PropertyDeclaration
from sheetcraft.model.style import LayoutStyleDeclaration, Model, StyleDeclaration
from sheetcraft.pipeline.flatten import flatten


def merge_base(
    models: Iterable[Model],
    base: tuple[PropertyDeclaration, ...],
    base_layout: tuple[LayoutDeclaration, ...],
) -> list[Model]:
    """Return new models with the base declarations in front of their own.

    Style properties are flattened after merging; layout lists have no
    groups and are only concatenated.
    """
    merged: list[Model] = []
    for model in models:
        if isinstance(model, StyleDeclaration):
            merged.append(replace(model, properties=flatten(base + tuple(model.properties))))
        elif isinstance(model, LayoutStyleDeclaration):
            merged.append(replace(model, properties=base_layout + tuple(model.properties)))
        else:
            raise TypeError(f"Unknown model type: {type(model).__name__}")
    return merged
