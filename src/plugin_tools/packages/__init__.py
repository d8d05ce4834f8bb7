"""Package enumeration.

Exports ``PackageRef``, the ``PackageLister`` protocol and the
filesystem-backed ``DirectoryPackageLister``.
"""
from __future__ import annotations

from plugin_tools.packages.lister import (
    PUBSPEC_FILENAME,
    DirectoryPackageLister,
    PackageLister,
    PackageRef,
    PackagesDirectoryError,
)

__all__ = [
    "PUBSPEC_FILENAME",
    "DirectoryPackageLister",
    "PackageLister",
    "PackageRef",
    "PackagesDirectoryError",
]
