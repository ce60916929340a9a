"""Control comments that switch checks on and off."""

from __future__ import annotations

from dataclasses import dataclass, field

from .lint_kind import LintKind

_PREFIX = "dotenv-linter:"
_ON = "on"
_OFF = "off"


@dataclass
class Comment:
    """A parsed control comment: whether it disables checks, and which."""

    disable: bool
    checks: list[LintKind] = field(default_factory=list)

    def is_disabled(self) -> bool:
        return self.disable


def parse_comment(text: str) -> Comment | None:
    """Parse a control comment line, or return None if it is not one."""
    body = text.lstrip()[1:].strip()
    if not body.startswith(_PREFIX):
        return None

    words = body[len(_PREFIX):].split()
    if not words:
        return None

    flag, *rest = words
    if flag not in (_ON, _OFF):
        return None

    checks = []
    for word in rest:
        for name in word.split(","):
            if not name:
                continue
            try:
                checks.append(LintKind(name))
            except ValueError:
                continue

    return Comment(disable=flag == _OFF, checks=checks)