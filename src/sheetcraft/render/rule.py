"""Default rule renderer: one declaration in, one named CSS rule out.

Style rules render as a main block followed by any extra blocks the
declarations need::

    .card {
      box-sizing: border-box;
      color: rgba(0, 0, 0, 1);
    }
    .card:hover {
      color: rgba(255, 0, 0, 1);
    }
"""

from __future__ import annotations

import hashlib

from sheetcraft.model.layout import (
    FlexLayout,
    Inline,
    LayoutDeclaration,
    Spacing,
    TableLayout,
    TextLayout,
)
from sheetcraft.model.output import RenderedRule
from sheetcraft.model.property import (
    Animation,
    Keyframe,
    PropertyDeclaration,
    SubElement,
    leaves,
)
from sheetcraft.model.style import LayoutStyleDeclaration, Model, StyleDeclaration
from sheetcraft.model.values import format_number
from sheetcraft.render.names import class_token, selector_name, selector_text
from sheetcraft.render.properties import (
    Pair,
    declaration_pairs,
    display_value,
    flex_pairs,
    iteration_count,
    spacing_value,
)


def _block(selector: str, pairs: list[Pair]) -> str:
    if not pairs:
        return f"{selector} {{}}"
    body = "\n".join(f"  {name}: {value};" for name, value in pairs)
    return f"{selector} {{\n{body}\n}}"


def _keyframe_line(step: Keyframe) -> str:
    pairs = [pair for prop in leaves(step.properties) for pair in declaration_pairs(prop)]
    body = " ".join(f"{name}: {value};" for name, value in pairs)
    return f"  {format_number(step.percent)}% {{ {body} }}"


class CssRuleRenderer:
    """Render style and layout declarations to CSS text.

    Names depend only on the selector, so declaring the same key twice yields
    two rules with one name. Layout rules carry *layout_suffix* so a style and
    a layout on the same selector never share a name. Literal rules are named
    outside the class-token namespace and are emitted with their raw selector.
    """

    def __init__(self, layout_suffix: str = "-layout") -> None:
        self.layout_suffix = layout_suffix

    def render(self, model: Model) -> RenderedRule:
        if isinstance(model, StyleDeclaration):
            name = selector_name(model.selector)
            blocks = self._style_blocks(
                selector_text(model.selector, name), name, model.properties
            )
        elif isinstance(model, LayoutStyleDeclaration):
            name = selector_name(model.selector, self.layout_suffix)
            blocks = self._layout_blocks(
                selector_text(model.selector, name), model.properties
            )
        else:
            raise TypeError(f"Cannot render model of type {type(model).__name__}")
        return RenderedRule(name=name, text="\n".join(blocks))

    # --- styles ---------------------------------------------------------------

    def _style_blocks(
        self,
        selector: str,
        name: str,
        properties: tuple[PropertyDeclaration, ...],
    ) -> list[str]:
        pairs: list[Pair] = []
        extra: list[str] = []
        for prop in leaves(properties):
            if isinstance(prop, SubElement):
                extra.extend(
                    self._style_blocks(selector + prop.selector, name, prop.properties)
                )
            elif isinstance(prop, Animation):
                keyframes_name, keyframes = self._keyframes(name, prop)
                extra.append(keyframes)
                pairs.append(("animation", self._animation_value(keyframes_name, prop)))
            else:
                pairs.extend(declaration_pairs(prop))
        return [_block(selector, pairs), *extra]

    @staticmethod
    def _keyframes(name: str, animation: Animation) -> tuple[str, str]:
        body = "\n".join(_keyframe_line(step) for step in animation.steps)
        digest = hashlib.sha256(body.encode()).hexdigest()[:8]
        keyframes_name = f"{class_token(name)}-anim-{digest}"
        return keyframes_name, f"@keyframes {keyframes_name} {{\n{body}\n}}"

    @staticmethod
    def _animation_value(keyframes_name: str, animation: Animation) -> str:
        return (
            f"{keyframes_name} {format_number(animation.duration)}ms "
            f"{animation.easing} {iteration_count(animation.repeat)}"
        )

    # --- layouts --------------------------------------------------------------

    def _layout_blocks(
        self, selector: str, properties: tuple[LayoutDeclaration, ...]
    ) -> list[str]:
        pairs: list[Pair] = []
        extra: list[str] = []
        kind: TextLayout | TableLayout | FlexLayout = TextLayout()
        inline = False
        for layout in properties:
            if isinstance(layout, (TextLayout, TableLayout, FlexLayout)):
                kind = layout
                pairs.append(("display", display_value(layout, inline)))
                if isinstance(layout, FlexLayout):
                    pairs.extend(flex_pairs(layout))
            elif isinstance(layout, Inline):
                inline = True
                pairs.append(("display", display_value(kind, inline=True)))
            elif isinstance(layout, Spacing):
                margin = spacing_value(layout.top, layout.right, layout.bottom, layout.left)
                extra.append(_block(f"{selector} > *", [("margin", margin)]))
            else:
                raise TypeError(
                    f"Cannot render layout declaration of type {type(layout).__name__}"
                )
        return [_block(selector, pairs), *extra]
