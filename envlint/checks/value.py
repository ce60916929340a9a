"""Checks on values, the equal sign and the order of keys."""

from __future__ import annotations

from ..common import is_escaped
from ..line_entry import LineEntry
from ..lint_kind import LintKind
from ..warning import LintWarning
from .base import Check


def _is_key_char(char: str) -> bool:
    return (char.isascii() and char.isalnum()) or char == "_"


class QuoteCharacterChecker(Check):
    """Reports a value wrapped in quotes that it does not need."""

    kind = LintKind.QUOTE_CHARACTER

    def run(self, line: LineEntry) -> LintWarning | None:
        value = line.get_value()
        if value is None:
            return None
        if "\\n" in value or "$" in value or any(char.isspace() for char in value):
            return None
        if '"' in value or "'" in value:
            return self._warn(line, "The value has quote characters (', \")")
        return None


class SpaceCharacterChecker(Check):
    """Reports spaces just before or just after the equal sign."""

    kind = LintKind.SPACE_CHARACTER

    def run(self, line: LineEntry) -> LintWarning | None:
        parts = line.raw_string.split("=")
        if len(parts) != 2:
            return None
        key, value = parts
        if key.endswith(" ") or value.startswith(" "):
            return self._warn(line, "The line has spaces around equal sign")
        return None


class SubstitutionKeyChecker(Check):
    """Reports a substitution whose braces do not match or that names an invalid key."""

    kind = LintKind.SUBSTITUTION_KEY

    @staticmethod
    def _is_incorrect(initial_key: str) -> bool:
        end_brace = initial_key.find("}")
        has_start_brace = initial_key.startswith("{")
        has_end_brace = end_brace != -1
        if has_start_brace != has_end_brace:
            return True
        if has_end_brace:
            return any(not _is_key_char(char) for char in initial_key[1:end_brace])
        return False

    def run(self, line: LineEntry) -> LintWarning | None:
        value = line.get_value()
        if value is None:
            return None
        value = value.strip()
        if value.startswith("'"):
            return None

        while (index := value.find("$")) != -1:
            prefix = value[:index]
            raw_key = value[index + 1:]

            next_dollar = raw_key.find("$")
            if next_dollar == -1:
                initial_key, rest = raw_key, ""
            else:
                initial_key, rest = raw_key[:next_dollar], raw_key[next_dollar:]

            if self._is_incorrect(initial_key) and not is_escaped(prefix):
                key = line.get_key()
                if key is None:
                    return None
                return self._warn(line, f"The {key} key is not assigned properly")

            value = rest
        return None


class UnorderedKeyChecker(Check):
    """Reports keys out of alphabetical order within a group of lines.

    Groups are separated by blank lines, control comments and lines that
    substitute a key from the current group.
    """

    kind = LintKind.UNORDERED_KEY
    skip_comments = False

    def __init__(self) -> None:
        self._keys: list[str] = []

    def run(self, line: LineEntry) -> LintWarning | None:
        has_substitution_in_group = any(
            key in self._keys for key in line.get_substitution_keys()
        )
        if (
            line.is_empty()
            or line.get_control_comment() is not None
            or has_substitution_in_group
        ):
            self._keys.clear()
            return None

        key = line.get_key()
        if key is None:
            return None
        self._keys.append(key)

        sorted_keys = sorted(self._keys)
        if sorted_keys == self._keys:
            return None

        position = sorted_keys.index(key)
        if position + 1 >= len(sorted_keys):
            return None
        another_key = sorted_keys[position + 1]
        return self._warn(line, f"The {key} key should go before the {another_key} key")