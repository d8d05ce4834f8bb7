"""Diagnostic types for the pubspec checker.

A ``Diagnostic`` is one detected convention violation.  A
``ValidationResult`` bundles every diagnostic found for one package
together with the overall pass/fail verdict.
"""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Diagnostic:
    """A single convention violation.

    Parameters
    ----------
    code:
        A short machine-readable identifier, e.g. ``"PUB002"``.
    message:
        Human-readable description of the problem.
    details:
        Continuation lines printed indented below ``message``.
    rule:
        The rule name that produced this diagnostic.
    """

    code: str
    message: str
    details: tuple[str, ...] = field(default=())
    rule: str = field(default="")

    def __str__(self) -> str:
        return "\n".join(self.lines())

    def lines(self, indent: str = "") -> list[str]:
        """Render the message at ``indent`` and each detail one level deeper."""
        return [f"{indent}{self.message}"] + [
            f"{indent}{indent}{detail}" for detail in self.details
        ]


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of checking one package's manifest."""

    diagnostics: tuple[Diagnostic, ...] = ()
    passed: bool = True

    @classmethod
    def from_diagnostics(cls, diagnostics: list[Diagnostic]) -> "ValidationResult":
        """Build a result that passes only when ``diagnostics`` is empty."""
        return cls(diagnostics=tuple(diagnostics), passed=not diagnostics)

    @property
    def messages(self) -> list[str]:
        """Return the diagnostic messages in report order."""
        return [d.message for d in self.diagnostics]

    @property
    def codes(self) -> list[str]:
        """Return the diagnostic codes in report order."""
        return [d.code for d in self.diagnostics]
