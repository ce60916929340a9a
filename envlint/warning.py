"""Warnings produced by checks and by file comparison."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .common import paint
from .lint_kind import LintKind


@dataclass
class LintWarning:
    """A problem found by a check on a given line."""

    line_number: int
    check_name: LintKind
    message: str

    def __str__(self) -> str:
        return (
            f"{paint(str(self.line_number), 'italic')} "
            f"{paint(str(self.check_name), 'red', 'bold')}: {self.message}"
        )


@dataclass
class CompareFileType:
    """An environment file taking part in a comparison."""

    path: Path
    keys: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)


@dataclass
class CompareWarning:
    """Keys that one file lacks compared with the others."""

    path: Path
    missing_keys: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        keys = ", ".join(paint(key, "red", "bold") for key in self.missing_keys)
        return f"{paint(str(self.path), 'italic')} is missing keys: {keys}"