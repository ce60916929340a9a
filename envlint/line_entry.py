"""A single line of an environment file and the parts it is made of."""

from __future__ import annotations

from dataclasses import dataclass

from .comment import Comment, parse_comment
from .common import is_escaped


def _is_key_char(char: str) -> bool:
    return (char.isascii() and char.isalnum()) or char == "_"


def _split_substitution(raw_key: str) -> tuple[str, str]:
    """Split the text after a dollar sign into the substituted key and the rest."""
    if raw_key.startswith("{"):
        inner = raw_key[1:]
        end = inner.find("}")
        if end != -1:
            return inner[:end], inner[end:]
    for index, char in enumerate(raw_key):
        if not _is_key_char(char):
            return raw_key[:index], raw_key[index:]
    return raw_key, ""


@dataclass
class LineEntry:
    """One line of a file, with its 1-based number."""

    number: int
    raw_string: str
    is_last_line: bool = False
    is_deleted: bool = False

    def is_empty_or_comment(self) -> bool:
        return self.is_empty() or self.is_comment()

    def is_empty(self) -> bool:
        return not self.trimmed_string()

    def is_comment(self) -> bool:
        return self.trimmed_string().startswith("#")

    def trimmed_string(self) -> str:
        return self.raw_string.strip()

    def _stripped_export_string(self) -> str:
        trimmed = self.trimmed_string()
        if trimmed.startswith("export "):
            return trimmed[len("export "):].strip()
        return trimmed

    def get_key(self) -> str | None:
        """Return the key of the line, or None for blank lines and comments."""
        if self.is_empty_or_comment():
            return None
        return self._stripped_export_string().split("=", 1)[0]

    def get_value(self) -> str | None:
        """Return everything after the first equal sign, if there is one."""
        if self.is_empty_or_comment():
            return None
        index = self.raw_string.find("=")
        if index == -1:
            return None
        return self.raw_string[index + 1:]

    def mark_as_deleted(self) -> None:
        self.is_deleted = True

    def get_control_comment(self) -> Comment | None:
        """Return the control comment on this line, if it holds one."""
        if not self.is_comment():
            return None
        return parse_comment(self.raw_string)

    def get_substitution_keys(self) -> list[str]:
        """Return the keys the value substitutes, in order of appearance."""
        keys: list[str] = []
        value = self.get_value()
        if value is None:
            return keys
        value = value.strip()
        if value.startswith("'"):
            return keys

        if value.startswith('"'):
            if len(value) > 1 and value.endswith('"') and not is_escaped(value[:-1]):
                value = value[1:-1]
            else:
                return keys

        while (index := value.find("$")) != -1:
            prefix = value[:index]
            raw_key = value[index + 1:]
            if is_escaped(prefix):
                value = raw_key
                continue
            key, rest = _split_substitution(raw_key)
            if not key:
                return keys
            keys.append(key)
            value = rest
        return keys