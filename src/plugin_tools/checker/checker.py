"""Pubspec checker: convention checks for one package manifest.

The ``PubspecChecker`` parses the manifest text and then runs a
configurable set of rules against it.  Parsing and the section-order
scan are separate passes over the same text; a manifest that fails to
parse gets a single diagnostic and no further checks.

Usage
-----
::

    from plugin_tools.checker import PubspecChecker

    checker = PubspecChecker()
    result = checker.validate(contents, package_name="url_launcher")
    for line in result.messages:
        print(line)
"""
from __future__ import annotations

import logging

from plugin_tools.checker.diagnostics import Diagnostic, ValidationResult
from plugin_tools.checker.rules import DEFAULT_RULES, PubspecContext, Rule
from plugin_tools.pubspec.parser import try_parse_pubspec

logger = logging.getLogger(__name__)


class PubspecChecker:
    """Configurable pubspec convention checker.

    Parameters
    ----------
    rules:
        Rules to run after a successful parse.  Defaults to all built-in
        rules (``DEFAULT_RULES``).
    """

    def __init__(self, rules: list[Rule] | None = None) -> None:
        self._rules: list[Rule] = rules if rules is not None else list(DEFAULT_RULES)

    def validate(self, contents: str, package_name: str) -> ValidationResult:
        """Check ``contents`` against every rule.

        Parameters
        ----------
        contents:
            The raw ``pubspec.yaml`` text.
        package_name:
            The package's directory name, which repository links must
            end with.

        Returns
        -------
        ValidationResult
            Every finding in rule order; passes only when there are none.
        """
        pubspec, error = try_parse_pubspec(contents)
        if pubspec is None:
            return ValidationResult.from_diagnostics([
                Diagnostic(
                    code="PUB000",
                    message=f"Cannot parse pubspec.yaml: {error}",
                    rule="parse",
                )
            ])

        ctx = PubspecContext(contents=contents, pubspec=pubspec, package_name=package_name)
        diagnostics: list[Diagnostic] = []
        for rule in self._rules:
            try:
                diagnostics.extend(rule(ctx))
            except Exception as exc:  # noqa: BLE001
                logger.debug("Rule %r raised", rule.__name__, exc_info=True)
                diagnostics.append(
                    Diagnostic(
                        code="PUB999",
                        message=f"Internal checker error in rule {rule.__name__!r}: {exc}",
                        rule=rule.__name__,
                    )
                )

        logger.debug(
            "Checked %s with %d rule(s): %d finding(s)",
            package_name,
            len(self._rules),
            len(diagnostics),
        )
        return ValidationResult.from_diagnostics(diagnostics)

    def add_rule(self, rule: Rule) -> None:
        """Add a custom rule.

        Parameters
        ----------
        rule:
            A callable ``(PubspecContext) -> list[Diagnostic]``.
        """
        self._rules.append(rule)

    @property
    def rule_count(self) -> int:
        """Return the number of rules currently registered."""
        return len(self._rules)


def validate(contents: str, package_name: str) -> ValidationResult:
    """Convenience function: check manifest text with the default rules."""
    return PubspecChecker().validate(contents, package_name)
