"""The ``pubspec-check`` batch command.

Runs the ``PubspecChecker`` over every package supplied by a
``PackageLister`` and reports the packages with convention issues.
Output goes through an injected ``echo`` callable, one line per call,
so the command can be driven from the CLI or from tests alike.

Output layout
-------------
::

    Checking some_package...
      <diagnostic>
        <diagnostic detail>

    The following packages have pubspec issues:
      some_package
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from plugin_tools.checker import PubspecChecker
from plugin_tools.packages import PackageLister

logger = logging.getLogger(__name__)

Echo = Callable[[str], None]

_INDENTATION = "  "


class PubspecCheckCommand:
    """Check every package's pubspec against the repository conventions.

    Parameters
    ----------
    lister:
        Supplies the packages to check, in the order they are reported.
    packages_dir:
        Root that package paths are reported relative to.
    echo:
        Output sink receiving one line of text per call.
    checker:
        The checker to run; defaults to one with all built-in rules.
    """

    name = "pubspec-check"
    description = "Checks that pubspecs follow repository conventions."

    def __init__(
        self,
        lister: PackageLister,
        packages_dir: Path,
        echo: Echo,
        checker: PubspecChecker | None = None,
    ) -> None:
        self._lister = lister
        self._packages_dir = Path(packages_dir)
        self._echo = echo
        self._checker = checker if checker is not None else PubspecChecker()

    def run(self) -> int:
        """Check all packages and return the process exit status (0 or 1)."""
        failing_packages: list[str] = []
        for package in self._lister.iter_packages():
            relative_path = package.relative_to(self._packages_dir)
            self._echo(f"Checking {relative_path}...")
            if not self._check_package(package.pubspec_path, package.name):
                failing_packages.append(relative_path)
            self._echo("")

        if failing_packages:
            self._echo("The following packages have pubspec issues:")
            for package_path in failing_packages:
                self._echo(f"{_INDENTATION}{package_path}")
            return 1

        self._echo("No pubspec issues found!")
        return 0

    def _check_package(self, pubspec_path: Path, package_name: str) -> bool:
        if not pubspec_path.is_file():
            logger.debug("No pubspec in %s; skipping", pubspec_path.parent)
            return True
        try:
            contents = pubspec_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            self._echo(f"{_INDENTATION}Cannot read pubspec.yaml: {exc}")
            return False

        result = self._checker.validate(contents, package_name=package_name)
        for diagnostic in result.diagnostics:
            for line in diagnostic.lines(_INDENTATION):
                self._echo(line)
        return result.passed
