# envlint

`envlint` is a library that checks the lines of `.env` files for common
mistakes and reports each problem with the line it was found on.

## Checks

| Check                | What it reports                                                 |
|----------------------|-----------------------------------------------------------------|
| `DuplicatedKey`      | a key that was already defined earlier in the file              |
| `EndingBlankLine`    | the last line does not end with a line feed                     |
| `ExtraBlankLine`     | a blank line directly after another blank line                  |
| `IncorrectDelimiter` | a key containing characters other than letters, digits and `_`  |
| `KeyWithoutValue`    | a line with a key but no `=` sign                               |
| `LeadingCharacter`   | a line starting with something other than a letter or `_`       |
| `LowercaseKey`       | a key that is not fully uppercase                               |
| `QuoteCharacter`     | a value with quote characters that it does not need             |
| `SpaceCharacter`     | spaces just before or just after the `=` sign                   |
| `SubstitutionKey`    | a malformed `$VAR` / `${VAR}` substitution                      |
| `TrailingWhitespace` | a space at the end of a line                                    |
| `UnorderedKey`       | keys within a group that are not in alphabetical order          |

Each check is a member of `envlint.lint_kind.LintKind` (for example
`LintKind.UNORDERED_KEY`), whose value is the name shown above;
`parse_lint_kind("UnorderedKey")` turns a name into a member and raises
`ValueError` for an unknown one.

For `UnorderedKey`, blank lines, control comments and lines that substitute a
key of the current group start a new group.

## Turning checks off inside a file

Control comments switch checks off and back on for the lines that follow:

```
# dotenv-linter:off LowercaseKey, UnorderedKey
foo=bar
# dotenv-linter:on LowercaseKey
```

Check names may be separated by commas, spaces or both; unknown names are
ignored. A comment without any check names is accepted but changes nothing.
`envlint.comment.parse_comment` parses such a line into a `Comment`.

## Using the library

```python
from envlint.checks.runner import available_check_names, run
from envlint.common import set_color_enabled
from envlint.line_entry import LineEntry
from envlint.lint_kind import LintKind

set_color_enabled(False)

source = ["FOO", "1FOO", "\n"]
lines = [
    LineEntry(number=i, raw_string=text, is_last_line=i == len(source))
    for i, text in enumerate(source, start=1)
]

for warning in run(lines, [LintKind.UNORDERED_KEY]):
    print(warning)

print(available_check_names())
```

`run` takes the lines of one file and the kinds of check to skip, and returns
`LintWarning` objects (line number, check kind, message) in the order they were
found. Printing a warning colours it with ANSI codes unless
`set_color_enabled(False)` was called.

Reading files:

- `envlint.file_entry.is_env_file(path)` tells whether a path looks like an
  env file (`.env`, `.env.local`, `prod.env`; never `.envrc` or `*.bak`).
- `envlint.file_entry.read_file_entry(path)` returns a `FileEntry` and the
  file's lines, or `None` if it cannot be read. A file ending in a line feed
  gets a final line holding just `"\n"`.

Other pieces:

- `envlint.output` has `CheckOutput`, `CompareOutput` and `FixOutput`, which
  print progress, warnings and totals to standard output, quietly or not.
- `envlint.warning` has `CompareWarning` and `CompareFileType` for reporting
  keys one file lacks compared with others.
- `envlint.cli.build_parser(current_dir)` builds an `argparse` parser for the
  options `-e/--exclude`, `-s/--skip`, `-r/--recursive`, `-q/--quiet`,
  `--no-color`, `--not-check-updates` and the subcommands `compare` (`c`),
  `fix` (`f`, with `--no-backup`) and `list` (`l`). Input paths default to
  `current_dir`.

## What it does not do

The package installs no command. `build_parser` only parses arguments;
nothing here walks directories for env files, compares files, or fixes and
rewrites them. Those are left to the code that uses the library.