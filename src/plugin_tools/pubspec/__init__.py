"""Pubspec manifest model and parser.

Exports the ``Pubspec`` record, the publish-destination variants, the
``parse_pubspec`` / ``try_parse_pubspec`` functions and
``PubspecParseError``.
"""
from __future__ import annotations

from plugin_tools.pubspec.errors import PubspecParseError
from plugin_tools.pubspec.model import (
    PublishDestination,
    PublishTarget,
    Pubspec,
    Unpublished,
    url_path,
)
from plugin_tools.pubspec.parser import UNPUBLISHED_SENTINEL, parse_pubspec, try_parse_pubspec

__all__ = [
    "Pubspec",
    "PublishDestination",
    "PublishTarget",
    "Unpublished",
    "PubspecParseError",
    "UNPUBLISHED_SENTINEL",
    "parse_pubspec",
    "try_parse_pubspec",
    "url_path",
]
