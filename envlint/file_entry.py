"""Environment files on disk and how they are recognised."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .common import LF

EXCLUDED_FILES = (".envrc",)
_ENV_PATTERN = ".env"


@dataclass(order=True)
class FileEntry:
    """A file to lint: its path, name and number of lines."""

    path: Path
    file_name: str
    total_lines: int

    def __str__(self) -> str:
        return str(self.path)


def _file_name(path: str | os.PathLike[str]) -> str | None:
    name = Path(path).name
    if name in ("", ".."):
        return None
    return name


def _split_lines(content: str) -> list[str]:
    if not content:
        return []
    parts = content.split(LF)
    ends_with_lf = content.endswith(LF)
    if ends_with_lf:
        parts.pop()
    last = len(parts) - 1
    lines = []
    for position, part in enumerate(parts):
        terminated = position < last or ends_with_lf
        if terminated and part.endswith("\r"):
            part = part[:-1]
        lines.append(part)
    if ends_with_lf:
        lines.append(LF)
    return lines


def read_file_entry(path: str | os.PathLike[str]) -> tuple[FileEntry, list[str]] | None:
    """Read a file into an entry and its lines, or return None if it cannot be read.

    A file that ends with a line feed gets a final line holding just that line feed.
    """
    file_name = _file_name(path)
    if file_name is None:
        return None
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            content = handle.read()
    except (OSError, UnicodeDecodeError):
        return None

    lines = _split_lines(content)
    return FileEntry(Path(path), file_name, len(lines)), lines


def is_env_file(path: str | os.PathLike[str]) -> bool:
    """Tell whether a file name looks like an environment file."""
    name = _file_name(path)
    return (
        name is not None
        and name not in EXCLUDED_FILES
        and (name.startswith(_ENV_PATTERN) or name.endswith(_ENV_PATTERN))
        and not name.endswith(".bak")
    )