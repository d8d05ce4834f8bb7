"""Pubspec convention checker.

Exports the ``PubspecChecker`` class, the ``validate`` convenience
function, result types, and all built-in rules.
"""
from __future__ import annotations

from plugin_tools.checker.checker import PubspecChecker, validate
from plugin_tools.checker.diagnostics import Diagnostic, ValidationResult
from plugin_tools.checker.rules import (
    DEFAULT_RULES,
    EXPECTED_ISSUE_LINK_FORMAT,
    MAJOR_SECTIONS,
    PubspecContext,
    Rule,
    check_section_order,
)

__all__ = [
    "PubspecChecker",
    "validate",
    "Diagnostic",
    "ValidationResult",
    "PubspecContext",
    "Rule",
    "DEFAULT_RULES",
    "MAJOR_SECTIONS",
    "EXPECTED_ISSUE_LINK_FORMAT",
    "check_section_order",
]
