"""Small string helpers and terminal colouring shared across the linter."""

from __future__ import annotations

LF = "\n"

_STYLE_CODES = {
    "bold": "1",
    "italic": "3",
}

_COLOR_CODES = {
    "red": "31",
    "green": "32",
    "yellow": "33",
}

_color_enabled = True


def remove_invalid_leading_chars(string: str) -> str:
    """Strip leading characters that are neither letters nor underscores."""
    for index, char in enumerate(string):
        if char.isalpha() or char == "_":
            return string[index:]
    return ""


def is_escaped(prefix: str) -> bool:
    """Tell whether the text ends with an odd number of backslashes."""
    trailing = len(prefix) - len(prefix.rstrip("\\"))
    return trailing % 2 == 1


def set_color_enabled(enabled: bool) -> None:
    """Turn coloured output on or off for every later call to paint."""
    global _color_enabled
    _color_enabled = bool(enabled)


def paint(text: str, *args: str) -> str:
    """Wrap text in ANSI escape codes for the named styles and colours.

    Accepted names are bold, italic, red, green and yellow. When colour
    output is disabled the text is returned unchanged.
    """
    unknown = [name for name in args if name not in _STYLE_CODES and name not in _COLOR_CODES]
    if unknown:
        raise ValueError(f"unknown style: {unknown[0]!r}")
    if not _color_enabled or not args:
        return text
    codes = [_STYLE_CODES[name] for name in args if name in _STYLE_CODES]
    codes += [_COLOR_CODES[name] for name in args if name in _COLOR_CODES]
    return f"\x1b[{';'.join(codes)}m{text}\x1b[0m"