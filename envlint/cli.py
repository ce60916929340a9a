"""Command-line argument parsing."""

from __future__ import annotations

import argparse
import os
import sys
from importlib.metadata import PackageNotFoundError, version

PROG = "envlint"

_PLAIN_FLAGS = frozenset(
    {"-r", "--recursive", "-q", "--quiet", "--no-color", "--not-check-updates"}
)


def _package_version() -> str:
    try:
        return version(PROG)
    except PackageNotFoundError:
        return "0.0.0"


def _add_version(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-v", "--version", action="version", version=f"%(prog)s {_package_version()}"
    )


def _add_output_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--no-color", dest="no_color", action="store_true", help="Turns off the colored output"
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Doesn't display additional information"
    )


def _add_common_args(parser: argparse.ArgumentParser, current_dir: str) -> None:
    parser.add_argument("input", nargs="*", default=[current_dir], help="files or paths")
    parser.add_argument(
        "-e",
        "--exclude",
        metavar="FILE_NAME",
        nargs="+",
        action="extend",
        default=[],
        help="Excludes files from check",
    )
    parser.add_argument(
        "-s",
        "--skip",
        metavar="CHECK_NAME",
        nargs="+",
        action="extend",
        default=[],
        help="Skips checks",
    )
    parser.add_argument(
        "-r", "--recursive", action="store_true", help="Recursively searches and checks .env files"
    )
    _add_output_flags(parser)


def _compare_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=f"{PROG} compare",
        usage=f"{PROG} compare [OPTIONS] <input>...",
        description="Compares if files have the same keys",
    )
    _add_version(parser)
    parser.add_argument("input", nargs="+", help="Files to compare")
    _add_output_flags(parser)
    return parser


def _fix_parser(current_dir: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=f"{PROG} fix",
        usage=f"{PROG} fix [OPTIONS] <input>...",
        description="Automatically fixes warnings",
    )
    _add_version(parser)
    _add_common_args(parser, current_dir)
    parser.add_argument(
        "--no-backup", dest="no_backup", action="store_true", help="Prevents backing up .env files"
    )
    return parser


def _list_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=f"{PROG} list",
        usage=f"{PROG} list",
        description="Shows list of available checks",
    )
    _add_version(parser)
    return parser


class _CommandParser(argparse.ArgumentParser):
    """A parser whose first positional argument may name a subcommand.

    A subcommand is recognised when it comes first, or follows only
    top-level flags that take no value. Otherwise every positional
    argument is an input path for the default check command.
    """

    def __init__(self, commands: dict[str, tuple[str, argparse.ArgumentParser]], **kwargs):
        super().__init__(**kwargs)
        self._commands = commands

    def parse_known_args(self, args=None, namespace=None):
        arguments = list(sys.argv[1:] if args is None else args)
        for position, argument in enumerate(arguments):
            if argument in self._commands:
                name, command_parser = self._commands[argument]
                namespace, extras = super().parse_known_args(arguments[:position], namespace)
                namespace, more = command_parser.parse_known_args(
                    arguments[position + 1:], namespace
                )
                namespace.command = name
                if name == "compare" and len(namespace.input) < 2:
                    command_parser.error("at least two files are required to compare")
                return namespace, extras + more
            if argument not in _PLAIN_FLAGS:
                break
        namespace, extras = super().parse_known_args(arguments, namespace)
        namespace.command = None
        return namespace, extras


def build_parser(current_dir: str | os.PathLike[str]) -> argparse.ArgumentParser:
    """Build the argument parser; inputs default to the given directory."""
    default_dir = os.fspath(current_dir)
    compare = _compare_parser()
    fix = _fix_parser(default_dir)
    listing = _list_parser()
    commands = {
        "compare": ("compare", compare),
        "c": ("compare", compare),
        "fix": ("fix", fix),
        "f": ("fix", fix),
        "list": ("list", listing),
        "l": ("list", listing),
    }
    parser = _CommandParser(
        commands,
        prog=PROG,
        description="Lightning-fast linter for .env files",
        epilog=(
            "commands:\n"
            "  compare, c  Compares if files have the same keys\n"
            "  fix, f      Automatically fixes warnings\n"
            "  list, l     Shows list of available checks"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    _add_version(parser)
    _add_common_args(parser, default_dir)
    parser.add_argument(
        "--not-check-updates",
        dest="not_check_updates",
        action="store_true",
        help="Doesn't check for updates",
    )
    return parser