"""Shared test fixtures for plugin-tools.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

GOOD_ISSUE_TRACKER = (
    "https://github.com/flutter/flutter/issues?q=is%3Aissue+is%3Aopen+label%3Ap%3A+{name}"
)

_SECTION_BODIES = {
    "environment": 'environment:\n  sdk: ">=2.12.0 <3.0.0"\n',
    "flutter": "flutter:\n  plugin:\n    platforms:\n      android:\n        package: io.example\n",
    "dependencies": "dependencies:\n  flutter:\n    sdk: flutter\n",
    "dev_dependencies": "dev_dependencies:\n  build_runner: ^2.0.0\n",
}

_DEFAULT = object()


def build_pubspec(
    name: str = "a_plugin",
    *,
    publish_to: str | None = None,
    repository: object = _DEFAULT,
    homepage: str | None = None,
    issue_tracker: object = _DEFAULT,
    sections: tuple[str, ...] = ("environment", "flutter", "dependencies", "dev_dependencies"),
) -> str:
    """Return pubspec text that passes every check unless told otherwise.

    ``repository`` and ``issue_tracker`` default to conforming links;
    pass ``None`` to leave them out.
    """
    if repository is _DEFAULT:
        repository = f"https://github.com/flutter/plugins/tree/master/packages/{name}"
    if issue_tracker is _DEFAULT:
        issue_tracker = GOOD_ISSUE_TRACKER.format(name=name)

    header = [f"name: {name}", "description: A test package.", "version: 1.0.0"]
    if publish_to is not None:
        header.append(f"publish_to: {publish_to}")
    if repository is not None:
        header.append(f"repository: {repository}")
    if homepage is not None:
        header.append(f"homepage: {homepage}")
    if issue_tracker is not None:
        header.append(f"issue_tracker: {issue_tracker}")

    body = "\n".join(_SECTION_BODIES[section] for section in sections)
    return "\n".join(header) + "\n\n" + body


@pytest.fixture()
def make_pubspec() -> Callable[..., str]:
    """Return the ``build_pubspec`` factory."""
    return build_pubspec


@pytest.fixture()
def packages_dir(tmp_path: Path) -> Path:
    """Return an empty ``packages/`` directory inside a temporary repo."""
    directory = tmp_path / "packages"
    directory.mkdir()
    return directory


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "plugin_tools"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"
