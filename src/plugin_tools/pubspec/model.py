"""Data model for a parsed ``pubspec.yaml`` manifest.

Every object produced by the pubspec parser is a frozen dataclass so
that a parsed manifest is read-only once produced.  The publish
destination is a small tagged variant: ``Unpublished`` for
``publish_to: none`` and ``PublishTarget`` for everything else.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union
from urllib.parse import urlsplit


# ---------------------------------------------------------------------------
# Publish destination
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Unpublished:
    """The package declares ``publish_to: none`` and is never published."""

    def __str__(self) -> str:
        return "none"


@dataclass(frozen=True, slots=True)
class PublishTarget:
    """The package is intended for public distribution.

    Parameters
    ----------
    url:
        The explicit ``publish_to`` server, or ``None`` for the default
        package server.
    """

    url: str | None = None

    def __str__(self) -> str:
        return self.url if self.url is not None else "<default>"


PublishDestination = Union[Unpublished, PublishTarget]


# ---------------------------------------------------------------------------
# Manifest
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Pubspec:
    """A parsed pubspec manifest.

    Only the top-level keys the convention checks care about are kept;
    everything else in the file is ignored.
    """

    name: str
    version: str | None = None
    publish_to: PublishDestination = field(default_factory=PublishTarget)
    repository: str | None = None
    homepage: str | None = None
    issue_tracker: str | None = None
    environment: dict[str, Any] = field(default_factory=dict)
    dependencies: dict[str, Any] = field(default_factory=dict)
    dev_dependencies: dict[str, Any] = field(default_factory=dict)
    flutter: dict[str, Any] | None = None

    @property
    def is_published(self) -> bool:
        """Return True unless the manifest opts out with ``publish_to: none``."""
        return isinstance(self.publish_to, PublishTarget)


def url_path(url: str) -> str:
    """Return the path component of ``url``."""
    return urlsplit(url).path
