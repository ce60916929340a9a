"""The interface every line check implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from ..line_entry import LineEntry
from ..lint_kind import LintKind
from ..warning import LintWarning


class Check(ABC):
    """A check that looks at one line at a time and may keep state between lines.

    Subclasses set ``kind`` to the lint kind they report. They set
    ``skip_comments`` to False if comment lines must be passed to them as well.
    """

    kind: ClassVar[LintKind]
    skip_comments: ClassVar[bool] = True

    @abstractmethod
    def run(self, line: LineEntry) -> LintWarning | None:
        """Inspect a line and return a warning for it, if there is one."""

    def _warn(self, line: LineEntry, message: str) -> LintWarning:
        return LintWarning(line.number, self.kind, message)