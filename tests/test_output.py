from pathlib import Path

import pytest

from envlint.common import set_color_enabled
from envlint.file_entry import FileEntry
from envlint.lint_kind import LintKind
from envlint.output import BACKUP_PREFIX, CheckOutput, CompareOutput, FixOutput
from envlint.warning import CompareWarning, LintWarning


@pytest.fixture(autouse=True)
def no_color():
    set_color_enabled(False)
    yield
    set_color_enabled(True)


@pytest.fixture
def entry():
    return FileEntry(Path("dir") / ".env", ".env", 2)


@pytest.fixture
def warning():
    return LintWarning(1, LintKind.DUPLICATED_KEY, "The FOO key is duplicated")


def test_check_nothing_to_check(capsys):
    CheckOutput(False, 0).print_nothing_to_check()
    assert capsys.readouterr().out == "Nothing to check\n"


def test_check_quiet_prints_nothing(capsys, entry):
    output = CheckOutput(True, 1)
    output.print_nothing_to_check()
    output.print_processing_info(entry)
    output.print_total(3)
    assert capsys.readouterr().out == ""


def test_check_processing_info(capsys, entry):
    CheckOutput(False, 1).print_processing_info(entry)
    assert capsys.readouterr().out == f"Checking {entry}\n"


def test_check_warnings_not_last_file_adds_blank(capsys, entry, warning):
    CheckOutput(False, 2).print_warnings(entry, [warning], 0)
    out = capsys.readouterr().out
    assert out == f"{entry}:{warning}\n\n"


def test_check_warnings_last_file(capsys, entry, warning):
    CheckOutput(False, 2).print_warnings(entry, [warning], 1)
    assert capsys.readouterr().out == f"{entry}:{warning}\n"


def test_check_warnings_quiet_still_prints_warnings(capsys, entry, warning):
    CheckOutput(True, 2).print_warnings(entry, [warning], 0)
    assert capsys.readouterr().out == f"{entry}:{warning}\n"


def test_check_total_plural_and_singular(capsys):
    output = CheckOutput(False, 1)
    output.print_total(1)
    single = capsys.readouterr().out
    output.print_total(2)
    plural = capsys.readouterr().out
    assert "Found 1 problem\n" in single
    assert "problems" not in single
    assert plural.startswith("\nFound 2 problems")


def test_check_total_none(capsys):
    CheckOutput(False, 1).print_total(0)
    assert capsys.readouterr().out == "\nNo problems found\n"


def test_compare_output(capsys, entry):
    output = CompareOutput(False)
    output.print_processing_info(entry)
    output.print_nothing_to_compare()
    assert capsys.readouterr().out == f"Comparing {entry}\nNothing to compare\n"


def test_compare_quiet_warnings(capsys):
    output = CompareOutput(True)
    compare_warning = CompareWarning(Path(".env"), ["FOO", "BAR"])
    output.print_nothing_to_compare()
    output.print_warnings([compare_warning])
    assert capsys.readouterr().out == f"{compare_warning}\n"


def test_fix_processing_and_total(capsys, entry):
    output = FixOutput(False, 1)
    output.print_processing_info(entry)
    output.print_total(4)
    out = capsys.readouterr().out
    assert out.startswith(f"Fixing {entry}\n")
    assert "All warnings are fixed. Total: 4" in out


def test_fix_total_none(capsys):
    FixOutput(True, 1).print_total(0)
    assert capsys.readouterr().out == "\nNo warnings found\n"


def test_fix_backup(capsys):
    FixOutput(True, 1).print_backup(Path(".env_1.bak"))
    out = capsys.readouterr().out
    assert out.startswith(BACKUP_PREFIX)
    assert out.rstrip("\n").endswith('".env_1.bak"')
    FixOutput(False, 1).print_backup(Path(".env_1.bak"))
    assert capsys.readouterr().out.endswith("\n\n")


def test_fix_warnings_quiet(capsys, entry, warning):
    FixOutput(True, 2).print_warnings(entry, [warning], 0)
    assert capsys.readouterr().out == ""


def test_fix_warnings_not_last(capsys, entry, warning):
    FixOutput(False, 2).print_warnings(entry, [warning], 0)
    assert capsys.readouterr().out == f"{entry}:{warning}\n\n"


def test_fix_nothing_to_fix(capsys):
    FixOutput(False, 0).print_nothing_to_fix()
    FixOutput(False, 1).print_nothing_to_fix()
    FixOutput(True, 0).print_nothing_to_fix()
    assert capsys.readouterr().out == "Nothing to fix\n"


def test_fix_not_all_warnings_fixed(capsys):
    FixOutput(True, 1).print_not_all_warnings_fixed()
    FixOutput(False, 1).print_not_all_warnings_fixed()
    assert capsys.readouterr().out == "Could not fix all warnings\n"