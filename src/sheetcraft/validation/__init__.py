"""Opt-in checks for stylesheet declarations."""

from sheetcraft.errors import ValidationError
from sheetcraft.validation.rules import ALL_RULES, RuleFunc
from sheetcraft.validation.validator import validate, validate_or_raise, validate_sheet

__all__ = [
    "validate",
    "validate_sheet",
    "validate_or_raise",
    "ValidationError",
    "ALL_RULES",
    "RuleFunc",
]
