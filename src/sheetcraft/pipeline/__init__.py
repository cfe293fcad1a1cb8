"""Render pipeline: option resolution through lookup building."""

from sheetcraft.pipeline.assemble import assemble
from sheetcraft.pipeline.dedupe import dedupe_rules
from sheetcraft.pipeline.flatten import flatten
from sheetcraft.pipeline.fonts import collect_font_families, google_fonts_import
from sheetcraft.pipeline.lookup import build_lookups, fallback_name, log_diagnostic
from sheetcraft.pipeline.merge import merge_base
from sheetcraft.pipeline.options import ResolvedOptions, resolve_options
from sheetcraft.pipeline.stylesheet import render_sheet, render_stylesheet

__all__ = [
    "render_stylesheet",
    "render_sheet",
    "flatten",
    "resolve_options",
    "ResolvedOptions",
    "merge_base",
    "collect_font_families",
    "google_fonts_import",
    "dedupe_rules",
    "assemble",
    "build_lookups",
    "fallback_name",
    "log_diagnostic",
]
