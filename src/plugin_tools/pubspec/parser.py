"""Structural parser for ``pubspec.yaml`` manifests.

The parser loads the document with PyYAML and then checks the handful
of top-level keys that the repository conventions depend on.  It is
deliberately not a general pubspec implementation: unknown keys are
ignored and nested sections are only checked for being mappings.

Usage
-----
::

    from plugin_tools.pubspec.parser import parse_pubspec

    pubspec = parse_pubspec(path.read_text(encoding="utf-8"))
    if pubspec.is_published:
        ...
"""
from __future__ import annotations

import logging
import re
from collections.abc import Hashable
from typing import Any
from urllib.parse import SplitResult, urlsplit

import yaml
from yaml.constructor import ConstructorError

from plugin_tools.pubspec.errors import PubspecParseError
from plugin_tools.pubspec.model import PublishDestination, PublishTarget, Pubspec, Unpublished

logger = logging.getLogger(__name__)

UNPUBLISHED_SENTINEL = "none"

_URL_KEYS = ("repository", "homepage", "issue_tracker")
_SECTION_KEYS = ("environment", "dependencies", "dev_dependencies", "flutter")

_IDENT = r"[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*"
_SEMVER = re.compile(rf"^\d+\.\d+\.\d+(?:-{_IDENT})?(?:\+{_IDENT})?$")


class _UniqueKeyLoader(yaml.SafeLoader):
    """``SafeLoader`` that rejects a mapping repeating one of its keys."""

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> dict[Any, Any]:
        seen: set[Hashable] = set()
        for key_node, _ in node.value:
            key = self.construct_object(key_node, deep=deep)
            if not isinstance(key, Hashable):
                continue
            if key in seen:
                raise ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    f"found duplicate key {key!r}",
                    key_node.start_mark,
                )
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


def parse_pubspec(text: str) -> Pubspec:
    """Parse manifest text into a ``Pubspec``.

    Parameters
    ----------
    text:
        Complete contents of a ``pubspec.yaml`` file.

    Returns
    -------
    Pubspec
        The parsed, read-only manifest record.

    Raises
    ------
    PubspecParseError
        If the text is not valid YAML (including repeated keys), nests too
        deeply, is not a mapping, or one of the recognised top-level keys
        has a value of the wrong shape.
    """
    try:
        document = yaml.load(text, Loader=_UniqueKeyLoader)  # noqa: S506
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        problem = getattr(exc, "problem", None) or str(exc)
        raise PubspecParseError(
            f"Invalid YAML: {problem}",
            line=mark.line + 1 if mark is not None else None,
        ) from exc
    except RecursionError as exc:
        raise PubspecParseError("Document nests too deeply.") from exc

    if not isinstance(document, dict):
        raise PubspecParseError("Does not represent a YAML map.")

    name = document.get("name")
    if name is None:
        raise PubspecParseError("Missing required key.", key="name")
    if not isinstance(name, str):
        raise PubspecParseError("Must be a string.", key="name")
    if not name:
        raise PubspecParseError("Cannot be empty.", key="name")

    sections = {key: _parse_section(document, key) for key in _SECTION_KEYS}
    urls = {key: _parse_url(document, key) for key in _URL_KEYS}

    return Pubspec(
        name=name,
        version=_parse_version(document.get("version")),
        publish_to=_parse_publish_to(document.get("publish_to")),
        repository=urls["repository"],
        homepage=urls["homepage"],
        issue_tracker=urls["issue_tracker"],
        environment=sections["environment"] or {},
        dependencies=sections["dependencies"] or {},
        dev_dependencies=sections["dev_dependencies"] or {},
        flutter=sections["flutter"],
    )


def try_parse_pubspec(text: str) -> tuple[Pubspec | None, PubspecParseError | None]:
    """Parse ``text``, returning ``(pubspec, None)`` or ``(None, error)``."""
    try:
        return parse_pubspec(text), None
    except PubspecParseError as exc:
        logger.debug("Pubspec parse failed: %s", exc)
        return None, exc


# ---------------------------------------------------------------------------
# Key parsers
# ---------------------------------------------------------------------------


def _parse_version(value: Any) -> str | None:
    if value is None:
        return None
    # An unquoted ``1.0`` loads as a float and is not a full version either.
    if not isinstance(value, str) or not _SEMVER.match(value):
        raise PubspecParseError(f"Not a semantic version: {value!r}", key="version")
    return value


def _split_url(value: str, key: str) -> SplitResult:
    try:
        return urlsplit(value)
    except ValueError as exc:
        raise PubspecParseError(f"Invalid URL: {exc}", key=key) from exc


def _parse_publish_to(value: Any) -> PublishDestination:
    if value is None:
        return PublishTarget()
    if not isinstance(value, str):
        raise PubspecParseError("Must be a string.", key="publish_to")
    if value == UNPUBLISHED_SENTINEL:
        return Unpublished()
    if _split_url(value, "publish_to").scheme not in ("http", "https"):
        raise PubspecParseError("Must be an http or https URL.", key="publish_to")
    return PublishTarget(url=value)


def _parse_url(document: dict[str, Any], key: str) -> str | None:
    value = document.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise PubspecParseError("Must be a URL string.", key=key)
    # Relative references are accepted; only unparseable text is an error.
    _split_url(value, key)
    return value


def _parse_section(document: dict[str, Any], key: str) -> dict[str, Any] | None:
    value = document.get(key)
    if value is None:
        return None
    if not isinstance(value, dict):
        raise PubspecParseError("Must be a map.", key=key)
    return value
