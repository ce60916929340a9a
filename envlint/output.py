"""Console reporting for the check, compare and fix commands."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass

from .common import paint
from .file_entry import FileEntry
from .warning import CompareWarning, LintWarning

BACKUP_PREFIX = "Original file was backed up to: "


def _print_file_warnings(file: FileEntry, warnings: Iterable[LintWarning]) -> None:
    for warning in warnings:
        print(f"{paint(f'{file}:', 'italic')}{warning}")


def _quoted_path(path: str | os.PathLike[str]) -> str:
    text = os.fspath(path).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


@dataclass
class CheckOutput:
    """Output of the check command."""

    is_quiet_mode: bool
    files_count: int

    def print_nothing_to_check(self) -> None:
        if not self.is_quiet_mode:
            print("Nothing to check")

    def print_processing_info(self, file: FileEntry) -> None:
        if not self.is_quiet_mode:
            print(f"Checking {file}")

    def print_warnings(self, file: FileEntry, warnings: list[LintWarning], file_index: int) -> None:
        _print_file_warnings(file, warnings)
        if self.is_quiet_mode:
            return
        is_last_file = file_index == self.files_count - 1
        if warnings and not is_last_file:
            print()

    def print_total(self, total: int) -> None:
        if self.is_quiet_mode:
            return
        if total:
            problems = "problem" if total == 1 else "problems"
            print(f"\n{paint(f'Found {total} {problems}', 'red', 'bold')}")
        else:
            print(f"\n{paint('No problems found', 'green', 'bold')}")


@dataclass
class CompareOutput:
    """Output of the compare command."""

    is_quiet_mode: bool

    def print_processing_info(self, file: FileEntry) -> None:
        if not self.is_quiet_mode:
            print(f"Comparing {file}")

    def print_warnings(self, warnings: list[CompareWarning]) -> None:
        for warning in warnings:
            print(warning)

    def print_nothing_to_compare(self) -> None:
        if not self.is_quiet_mode:
            print("Nothing to compare")


@dataclass
class FixOutput:
    """Output of the fix command."""

    is_quiet_mode: bool
    files_count: int

    def print_processing_info(self, file: FileEntry) -> None:
        if not self.is_quiet_mode:
            print(f"Fixing {file}")

    def print_total(self, total: int) -> None:
        if total:
            print(f"\nAll warnings are fixed. Total: {total}")
        else:
            print("\nNo warnings found")

    def print_backup(self, backup_path: str | os.PathLike[str]) -> None:
        print(f"{BACKUP_PREFIX}{_quoted_path(backup_path)}")
        if not self.is_quiet_mode:
            print()

    def print_warnings(self, file: FileEntry, warnings: list[LintWarning], file_index: int) -> None:
        if self.is_quiet_mode:
            return
        _print_file_warnings(file, warnings)
        is_last_file = file_index == self.files_count - 1
        if warnings and not is_last_file:
            print()

    def print_nothing_to_fix(self) -> None:
        if self.is_quiet_mode or self.files_count > 0:
            return
        print("Nothing to fix")

    def print_not_all_warnings_fixed(self) -> None:
        if self.is_quiet_mode:
            return
        print(paint("Could not fix all warnings", "red", "bold"))