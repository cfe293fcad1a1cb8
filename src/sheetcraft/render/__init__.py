"""Rule rendering: turn one declaration into a named CSS rule."""

from sheetcraft.render.base import Renderer
from sheetcraft.render.names import class_token, key_class, selector_name
from sheetcraft.render.rule import CssRuleRenderer

__all__ = ["Renderer", "CssRuleRenderer", "class_token", "key_class", "selector_name"]
