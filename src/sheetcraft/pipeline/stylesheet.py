"""The render pipeline: options and models in, stylesheet and lookups out."""

from __future__ import annotations

import logging
from typing import Hashable, Iterable

from sheetcraft.config import DEFAULT_CONFIG, SheetConfig
from sheetcraft.model.options import RenderOption
from sheetcraft.model.output import RenderedRule, StylesheetOutput
from sheetcraft.model.selector import ByKey
from sheetcraft.model.style import Model, Sheet, StyleDeclaration
from sheetcraft.pipeline.assemble import assemble
from sheetcraft.pipeline.dedupe import dedupe_rules
from sheetcraft.pipeline.fonts import collect_font_families, google_fonts_import
from sheetcraft.pipeline.lookup import DiagnosticSink, build_lookups, log_diagnostic
from sheetcraft.pipeline.merge import merge_base
from sheetcraft.pipeline.options import resolve_options
from sheetcraft.render.base import Renderer
from sheetcraft.render.rule import CssRuleRenderer

logger = logging.getLogger(__name__)


def render_stylesheet(
    options: Iterable[RenderOption],
    models: Iterable[Model],
    *,
    renderer: Renderer | None = None,
    config: SheetConfig | None = None,
    on_diagnostic: DiagnosticSink | None = None,
) -> StylesheetOutput:
    """Compile *models* into one stylesheet plus key lookups.

    Steps, in order: resolve options, merge the base style into every model,
    collect webfonts (if requested), render each model, drop rules whose name
    was already rendered, then assemble the prelude and rule text.

    Args:
        options: Render options, applied in order.
        models: Style and layout declarations, in output order.
        renderer: Rule renderer; defaults to :class:`CssRuleRenderer`.
        config: Naming and webfont settings; defaults to ``DEFAULT_CONFIG``.
        on_diagnostic: Receives missing-style diagnostics in debug mode;
            defaults to logging them.
    """
    config = config or DEFAULT_CONFIG
    renderer = renderer or CssRuleRenderer(layout_suffix=config.layout_suffix)
    sink = on_diagnostic or log_diagnostic

    resolved = resolve_options(options)
    merged = merge_base(models, resolved.base, resolved.base_layout)

    fonts_import = None
    if resolved.wants_google_fonts:
        fonts_import = google_fonts_import(collect_font_families(merged, config), config)

    rendered: list[RenderedRule] = []
    styles: dict[Hashable, RenderedRule] = {}
    layouts: dict[Hashable, RenderedRule] = {}
    for model in merged:
        rule = renderer.render(model)
        rendered.append(rule)
        if isinstance(model.selector, ByKey):
            table = styles if isinstance(model, StyleDeclaration) else layouts
            table.setdefault(model.selector.key, rule)

    unique = dedupe_rules(rendered)
    css_text = assemble(resolved.prelude_with(fonts_import), unique)
    logger.debug(
        "Rendered %d model(s) into %d rule(s) (%d duplicate(s) dropped)",
        len(rendered),
        len(unique),
        len(rendered) - len(unique),
    )

    class_of, class_list_of, layout_of = build_lookups(
        styles, layouts, debug=resolved.debug, config=config, sink=sink
    )
    return StylesheetOutput(
        css_text=css_text,
        class_of=class_of,
        class_list_of=class_list_of,
        layout_of=layout_of,
    )


def render_sheet(sheet: Sheet, **kwargs) -> StylesheetOutput:
    """Render a :class:`Sheet`; keyword arguments as for ``render_stylesheet``."""
    return render_stylesheet(sheet.options, sheet.models, **kwargs)
