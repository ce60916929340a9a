"""Names of the available lint checks."""

from __future__ import annotations

from enum import Enum


class LintKind(Enum):
    """A kind of lint check, valued by its public name."""

    DUPLICATED_KEY = "DuplicatedKey"
    ENDING_BLANK_LINE = "EndingBlankLine"
    EXTRA_BLANK_LINE = "ExtraBlankLine"
    INCORRECT_DELIMITER = "IncorrectDelimiter"
    KEY_WITHOUT_VALUE = "KeyWithoutValue"
    LEADING_CHARACTER = "LeadingCharacter"
    LOWERCASE_KEY = "LowercaseKey"
    QUOTE_CHARACTER = "QuoteCharacter"
    SPACE_CHARACTER = "SpaceCharacter"
    SUBSTITUTION_KEY = "SubstitutionKey"
    TRAILING_WHITESPACE = "TrailingWhitespace"
    UNORDERED_KEY = "UnorderedKey"

    def __str__(self) -> str:
        return self.value


def parse_lint_kind(name: str) -> LintKind:
    """Return the lint kind with the given public name.

    Raises ValueError when the name is not a known check.
    """
    try:
        return LintKind(name)
    except ValueError:
        raise ValueError(f"unknown check name: {name!r}") from None