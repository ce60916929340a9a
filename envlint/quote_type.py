"""Quote styles that a value may open with."""

from __future__ import annotations

from enum import Enum

from .common import is_escaped


class QuoteType(Enum):
    """A quote character used around values."""

    SINGLE = "'"
    DOUBLE = '"'

    @property
    def char(self) -> str:
        return self.value

    def is_quoted_value(self, value: str) -> bool:
        """Tell whether the value opens with this quote and is not closed by it."""
        return value.startswith(self.char) and (
            len(value) == 1
            or not value.endswith(self.char)
            or is_escaped(value[:-1])
        )