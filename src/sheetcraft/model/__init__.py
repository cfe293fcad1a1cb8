"""Sheetcraft model layer -- public type re-exports."""

from sheetcraft.model.diagnostic import Diagnostic, Severity
from sheetcraft.model.layout import (
    FlexLayout,
    Inline,
    LayoutDeclaration,
    Spacing,
    TableLayout,
    TextLayout,
)
from sheetcraft.model.options import (
    AutoImportGoogleFonts,
    BaseStyle,
    DebugMode,
    ImportRaw,
    ImportUrl,
    RenderOption,
)
from sheetcraft.model.output import RenderedRule, StylesheetOutput
from sheetcraft.model.property import (
    Animation,
    BackgroundImage,
    BoxProp,
    ColorProp,
    Filters,
    Float,
    Group,
    Keyframe,
    LengthProp,
    Position,
    PositionParent,
    Prop,
    PropertyDeclaration,
    Shadows,
    SubElement,
    Transforms,
    Transition,
    Visibility,
)
from sheetcraft.model.selector import ByKey, Literal, Selector, key_text
from sheetcraft.model.style import LayoutStyleDeclaration, Model, Sheet, StyleDeclaration
from sheetcraft.model.values import Color, Filter, Length, Shadow, Transform

__all__ = [
    # selector
    "ByKey",
    "Literal",
    "Selector",
    "key_text",
    # values
    "Color",
    "Length",
    "Shadow",
    "Transform",
    "Filter",
    # properties
    "Prop",
    "ColorProp",
    "LengthProp",
    "BoxProp",
    "Position",
    "PositionParent",
    "Visibility",
    "BackgroundImage",
    "Shadows",
    "Transforms",
    "Filters",
    "Transition",
    "Keyframe",
    "Animation",
    "SubElement",
    "Float",
    "Group",
    "PropertyDeclaration",
    # layout
    "TextLayout",
    "TableLayout",
    "FlexLayout",
    "Inline",
    "Spacing",
    "LayoutDeclaration",
    # styles
    "StyleDeclaration",
    "LayoutStyleDeclaration",
    "Model",
    "Sheet",
    # options
    "AutoImportGoogleFonts",
    "ImportRaw",
    "ImportUrl",
    "BaseStyle",
    "DebugMode",
    "RenderOption",
    # output
    "RenderedRule",
    "StylesheetOutput",
    # diagnostic
    "Severity",
    "Diagnostic",
]
