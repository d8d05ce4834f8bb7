"""Error types for the pubspec parser."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PubspecParseError(Exception):
    """Raised when manifest text does not follow the pubspec grammar.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    key:
        The top-level key that failed validation, if any.
    line:
        1-based line of the problem, when the YAML loader reported one.
    """

    message: str
    key: str | None = None
    line: int | None = None

    def __str__(self) -> str:
        text = self.message
        if self.key is not None:
            text = f'"{self.key}": {text}'
        if self.line is not None:
            text = f"line {self.line}: {text}"
        return text

    # dataclass(frozen=True) doesn't call Exception.__init__ automatically
    def __post_init__(self) -> None:
        object.__setattr__(self, "args", (str(self),))
