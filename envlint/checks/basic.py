"""Checks on keys, blank lines and whitespace."""

from __future__ import annotations

from ..common import LF, remove_invalid_leading_chars
from ..line_entry import LineEntry
from ..lint_kind import LintKind
from ..warning import LintWarning
from .base import Check


class DuplicatedKeyChecker(Check):
    """Reports a key that was already defined earlier in the file."""

    kind = LintKind.DUPLICATED_KEY

    def __init__(self) -> None:
        self._keys: set[str] = set()

    def run(self, line: LineEntry) -> LintWarning | None:
        key = line.get_key()
        if key is None:
            return None
        if key in self._keys:
            return self._warn(line, f"The {key} key is duplicated")
        self._keys.add(key)
        return None


class EndingBlankLineChecker(Check):
    """Reports a file whose last line does not end with a line feed."""

    kind = LintKind.ENDING_BLANK_LINE
    skip_comments = False

    def run(self, line: LineEntry) -> LintWarning | None:
        if line.is_last_line and not line.raw_string.endswith(LF):
            return self._warn(line, "No blank line at the end of the file")
        return None


class ExtraBlankLineChecker(Check):
    """Reports a blank line that directly follows another blank line."""

    kind = LintKind.EXTRA_BLANK_LINE

    def __init__(self) -> None:
        self._last_blank_number: int | None = None

    def run(self, line: LineEntry) -> LintWarning | None:
        if not line.is_empty():
            return None
        is_extra = (
            self._last_blank_number is not None
            and self._last_blank_number + 1 == line.number
        )
        self._last_blank_number = line.number
        if is_extra:
            return self._warn(line, "Extra blank line detected")
        return None


class IncorrectDelimiterChecker(Check):
    """Reports a key that separates its words with something other than an underscore."""

    kind = LintKind.INCORRECT_DELIMITER

    def run(self, line: LineEntry) -> LintWarning | None:
        key = line.get_key()
        if key is None:
            return None
        # Delimiters sit between characters, so invalid leading characters are ignored.
        cleaned = remove_invalid_leading_chars(key).strip()
        if any(not char.isalnum() and char != "_" for char in cleaned):
            return self._warn(line, f"The {key} key has incorrect delimiter")
        return None


class KeyWithoutValueChecker(Check):
    """Reports a line that has a key but no equal sign."""

    kind = LintKind.KEY_WITHOUT_VALUE

    def run(self, line: LineEntry) -> LintWarning | None:
        if line.is_empty() or "=" in line.raw_string:
            return None
        key = line.get_key()
        if key is None:
            key = line.raw_string
        return self._warn(line, f"The {key} key should be with a value or have an equal sign")


class LeadingCharacterChecker(Check):
    """Reports a line that starts with something other than a letter or underscore."""

    kind = LintKind.LEADING_CHARACTER

    def run(self, line: LineEntry) -> LintWarning | None:
        if line.is_empty():
            return None
        first = line.raw_string[:1]
        if first and (first.isalpha() or first == "_"):
            return None
        return self._warn(line, "Invalid leading character detected")


class LowercaseKeyChecker(Check):
    """Reports a key that is not entirely in uppercase."""

    kind = LintKind.LOWERCASE_KEY

    def run(self, line: LineEntry) -> LintWarning | None:
        key = line.get_key()
        if key is None or key.upper() == key:
            return None
        return self._warn(line, f"The {key} key should be in uppercase")


class TrailingWhitespaceChecker(Check):
    """Reports a line that ends with a space."""

    kind = LintKind.TRAILING_WHITESPACE

    def run(self, line: LineEntry) -> LintWarning | None:
        if line.raw_string.endswith(" "):
            return self._warn(line, "Trailing whitespace detected")
        return None