"""plugin-tools — monorepo maintenance tools: pubspec convention checker.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import plugin_tools

    # Parse a manifest into a read-only record
    pubspec = plugin_tools.parse_pubspec(text)

    # Check it against the repository conventions
    result = plugin_tools.validate(text, package_name="url_launcher")
    if not result.passed:
        for message in result.messages:
            print(message)

    plugin_tools.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from plugin_tools.checker.diagnostics import ValidationResult
    from plugin_tools.pubspec.model import Pubspec


def parse_pubspec(text: str) -> "Pubspec":
    """Parse ``pubspec.yaml`` text into a ``Pubspec`` record.

    Raises
    ------
    plugin_tools.pubspec.PubspecParseError
        If the text does not follow the pubspec grammar.
    """
    from plugin_tools.pubspec.parser import parse_pubspec as _parse_pubspec

    return _parse_pubspec(text)


def validate(text: str, package_name: str) -> "ValidationResult":
    """Check ``pubspec.yaml`` text against the repository conventions.

    Parameters
    ----------
    text:
        The raw manifest text.
    package_name:
        The package's directory name.

    Returns
    -------
    ValidationResult
        All findings plus the overall pass/fail verdict.  Parse failures
        are reported as a diagnostic, never raised.
    """
    from plugin_tools.checker.checker import validate as _validate

    return _validate(text, package_name)


__all__ = [
    "__version__",
    "parse_pubspec",
    "validate",
]
