"""Package enumeration for a monorepo ``packages/`` directory.

The pubspec check does not walk the filesystem itself; it is handed a
``PackageLister``.  ``DirectoryPackageLister`` is the filesystem-backed
implementation used by the CLI.

Layout understood
-----------------
::

    packages/
      simple_package/            -> yielded
        pubspec.yaml
      federated_plugin/          -> no pubspec, so its children are yielded
        federated_plugin/
          pubspec.yaml
        federated_plugin_web/
          pubspec.yaml
      not_a_package/             -> yielded as-is (checked and skipped)
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

PUBSPEC_FILENAME = "pubspec.yaml"


class PackagesDirectoryError(FileNotFoundError):
    """Raised when the packages directory to enumerate does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"Packages directory {str(path)!r} does not exist. "
            "Run from the repository root or pass --packages-dir."
        )


@dataclass(frozen=True)
class PackageRef:
    """A package directory handed to the checker.

    Parameters
    ----------
    name:
        The package's directory name.
    path:
        Filesystem path of the package directory.
    """

    name: str
    path: Path

    @property
    def pubspec_path(self) -> Path:
        return self.path / PUBSPEC_FILENAME

    def relative_to(self, root: Path) -> str:
        """Return this package's path relative to ``root`` in POSIX form."""
        try:
            return self.path.relative_to(root).as_posix()
        except ValueError:
            return self.path.as_posix()


class PackageLister(Protocol):
    """Anything that can enumerate the packages to check."""

    def iter_packages(self) -> Iterator[PackageRef]:
        ...


class DirectoryPackageLister:
    """Enumerate the packages below a ``packages/`` directory.

    Parameters
    ----------
    packages_dir:
        The directory holding one subdirectory per package (or per
        federated plugin).
    include:
        If non-empty, only packages with one of these names (or living
        under a top-level directory with one of these names) are yielded.
    exclude:
        Packages to skip, matched the same way as ``include``.
    """

    def __init__(
        self,
        packages_dir: Path,
        include: Iterable[str] = (),
        exclude: Iterable[str] = (),
    ) -> None:
        self._packages_dir = Path(packages_dir)
        self._include = frozenset(include)
        self._exclude = frozenset(exclude)

    @property
    def packages_dir(self) -> Path:
        return self._packages_dir

    def iter_packages(self) -> Iterator[PackageRef]:
        """Yield package references in sorted directory-name order.

        Raises
        ------
        PackagesDirectoryError
            If ``packages_dir`` does not exist.
        """
        if not self._packages_dir.is_dir():
            raise PackagesDirectoryError(self._packages_dir)

        for entry in _sorted_subdirectories(self._packages_dir):
            for ref in self._expand(entry):
                if self._selected(entry.name, ref.name):
                    yield ref
                else:
                    logger.debug("Skipping filtered package %s", ref.name)

    def _expand(self, entry: Path) -> list[PackageRef]:
        if (entry / PUBSPEC_FILENAME).is_file():
            return [PackageRef(name=entry.name, path=entry)]
        children = [
            PackageRef(name=child.name, path=child)
            for child in _sorted_subdirectories(entry)
            if (child / PUBSPEC_FILENAME).is_file()
        ]
        if children:
            logger.debug("Found %d package(s) in federated %s", len(children), entry.name)
            return children
        return [PackageRef(name=entry.name, path=entry)]

    def _selected(self, top_level: str, name: str) -> bool:
        names = {top_level, name}
        if self._include and not names & self._include:
            return False
        return not names & self._exclude


def _sorted_subdirectories(directory: Path) -> list[Path]:
    return sorted(
        (p for p in directory.iterdir() if p.is_dir() and not p.name.startswith(".")),
        key=lambda p: p.name,
    )
