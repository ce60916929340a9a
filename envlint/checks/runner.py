"""Running every line check over the lines of a file."""

from __future__ import annotations

from collections.abc import Iterable

from ..line_entry import LineEntry
from ..lint_kind import LintKind
from ..warning import LintWarning
from .base import Check
from .basic import (
    DuplicatedKeyChecker,
    EndingBlankLineChecker,
    ExtraBlankLineChecker,
    IncorrectDelimiterChecker,
    KeyWithoutValueChecker,
    LeadingCharacterChecker,
    LowercaseKeyChecker,
    TrailingWhitespaceChecker,
)
from .value import (
    QuoteCharacterChecker,
    SpaceCharacterChecker,
    SubstitutionKeyChecker,
    UnorderedKeyChecker,
)


def checklist() -> list[Check]:
    """Return a fresh instance of every available check, in reporting order."""
    return [
        DuplicatedKeyChecker(),
        EndingBlankLineChecker(),
        ExtraBlankLineChecker(),
        IncorrectDelimiterChecker(),
        KeyWithoutValueChecker(),
        LeadingCharacterChecker(),
        LowercaseKeyChecker(),
        QuoteCharacterChecker(),
        SpaceCharacterChecker(),
        SubstitutionKeyChecker(),
        TrailingWhitespaceChecker(),
        UnorderedKeyChecker(),
    ]


def available_check_names() -> list[LintKind]:
    """Return the kinds of all available checks."""
    return [check.kind for check in checklist()]


def run(lines: Iterable[LineEntry], skip_checks: Iterable[LintKind]) -> list[LintWarning]:
    """Run all checks not skipped over the lines and collect their warnings.

    Control comments in the lines switch individual checks off and on again
    for the lines that follow them.
    """
    skipped = set(skip_checks)
    checks = [check for check in checklist() if check.kind not in skipped]
    disabled: set[LintKind] = set()
    warnings: list[LintWarning] = []

    for line in lines:
        comment = line.get_control_comment()
        if comment is not None:
            if comment.is_disabled():
                disabled.update(comment.checks)
            else:
                disabled.difference_update(comment.checks)

        is_comment = line.is_comment()
        for check in checks:
            if is_comment and check.skip_comments:
                continue
            if check.kind in disabled:
                continue
            warning = check.run(line)
            if warning is not None:
                warnings.append(warning)

    return warnings