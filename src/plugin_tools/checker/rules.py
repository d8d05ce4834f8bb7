"""Convention rules for pubspec manifests.

Each rule is a callable that accepts a ``PubspecContext`` and returns a
list of ``Diagnostic`` objects.  Rules are composed into the
``PubspecChecker`` which runs them all and aggregates results.

Rule codes:

    PUB001  Major sections out of standard order
    PUB002  Missing "repository" (published packages)
    PUB003  "repository" link does not end with the package name
    PUB004  "homepage" entry present (published packages)
    PUB005  "issue_tracker" missing or not a flutter/flutter label search
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from plugin_tools.checker.diagnostics import Diagnostic
from plugin_tools.pubspec.model import Pubspec, url_path

MAJOR_SECTIONS: tuple[str, ...] = (
    "environment:",
    "flutter:",
    "dependencies:",
    "dev_dependencies:",
)

EXPECTED_ISSUE_LINK_FORMAT = (
    "https://github.com/flutter/flutter/issues?q=is%3Aissue+is%3Aopen+label%3A"
)


@dataclass(frozen=True)
class PubspecContext:
    """Everything a rule may look at for one package.

    ``contents`` is the raw manifest text and ``pubspec`` its parsed form;
    rules pick whichever pass they need.
    """

    contents: str
    pubspec: Pubspec
    package_name: str


Rule = Callable[[PubspecContext], list[Diagnostic]]


def check_section_order(contents: str) -> bool:
    """Return True if the major section headers appear in standard order.

    Only lines exactly equal to one of ``MAJOR_SECTIONS`` are considered;
    missing or repeated sections are not errors by themselves.
    """
    previous_index = 0
    for line in contents.split("\n"):
        line = line.removesuffix("\r")
        if line not in MAJOR_SECTIONS:
            continue
        index = MAJOR_SECTIONS.index(line)
        if index < previous_index:
            return False
        previous_index = index
    return True


def rule_section_order(ctx: PubspecContext) -> list[Diagnostic]:
    """PUB001: Major sections must follow the standard repository order."""
    if check_section_order(ctx.contents):
        return []
    return [Diagnostic(
        code="PUB001",
        message="Major sections should follow standard repository ordering:",
        details=MAJOR_SECTIONS,
        rule="section_order",
    )]


def rule_repository_link(ctx: PubspecContext) -> list[Diagnostic]:
    """PUB002/PUB003: Published packages need a repository link ending in their name."""
    if not ctx.pubspec.is_published:
        return []
    if ctx.pubspec.repository is None:
        return [Diagnostic(code="PUB002", message='Missing "repository"', rule="repository_link")]
    if not url_path(ctx.pubspec.repository).endswith(ctx.package_name):
        return [Diagnostic(
            code="PUB003",
            message='The "repository" link should end with the package name.',
            rule="repository_link",
        )]
    return []


def rule_homepage(ctx: PubspecContext) -> list[Diagnostic]:
    """PUB004: Published packages use "repository" instead of "homepage"."""
    if not ctx.pubspec.is_published or ctx.pubspec.homepage is None:
        return []
    return [Diagnostic(
        code="PUB004",
        message='Found a "homepage" entry; only "repository" should be used.',
        rule="homepage",
    )]


def rule_issue_tracker(ctx: PubspecContext) -> list[Diagnostic]:
    """PUB005: Published packages link to a labelled flutter/flutter issue search."""
    if not ctx.pubspec.is_published:
        return []
    link = ctx.pubspec.issue_tracker
    if link is not None and link.startswith(EXPECTED_ISSUE_LINK_FORMAT):
        return []
    return [Diagnostic(
        code="PUB005",
        message=(
            'A package should have an "issue_tracker" link to a search for open '
            "flutter/flutter bugs with the relevant label:"
        ),
        details=(f"{EXPECTED_ISSUE_LINK_FORMAT}<package label>",),
        rule="issue_tracker",
    )]


DEFAULT_RULES: list[Rule] = [
    rule_section_order,
    rule_repository_link,
    rule_homepage,
    rule_issue_tracker,
]
