import pytest

from envlint.cli import build_parser


@pytest.fixture
def parser(tmp_path):
    return build_parser(tmp_path)


def test_defaults_use_current_dir(parser, tmp_path):
    args = parser.parse_args([])
    assert args.command is None
    assert args.input == [str(tmp_path)]
    assert args.exclude == []
    assert args.skip == []
    assert args.recursive is False
    assert args.quiet is False
    assert args.no_color is False
    assert args.not_check_updates is False


def test_inputs_and_flags(parser):
    args = parser.parse_args([".env", "other/.env", "-r", "-q", "--no-color"])
    assert args.command is None
    assert args.input == [".env", "other/.env"]
    assert args.recursive is True
    assert args.quiet is True
    assert args.no_color is True


def test_exclude_and_skip_take_many_values(parser):
    args = parser.parse_args(
        ["-e", ".env.a", ".env.b", "-s", "UnorderedKey", "--skip", "LowercaseKey"]
    )
    assert args.exclude == [".env.a", ".env.b"]
    assert args.skip == ["UnorderedKey", "LowercaseKey"]


def test_compare_command(parser):
    args = parser.parse_args(["compare", ".env", ".env.example", "--no-color"])
    assert args.command == "compare"
    assert args.input == [".env", ".env.example"]
    assert args.no_color is True


def test_compare_alias(parser):
    args = parser.parse_args(["c", "a.env", "b.env", "-q"])
    assert args.command == "compare"
    assert args.quiet is True


def test_compare_requires_two_files(parser):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["compare", ".env"])
    assert excinfo.value.code == 2


def test_compare_requires_input(parser):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["compare"])
    assert excinfo.value.code == 2


def test_fix_command(parser, tmp_path):
    args = parser.parse_args(["fix", "--no-backup"])
    assert args.command == "fix"
    assert args.no_backup is True
    assert args.input == [str(tmp_path)]


def test_fix_alias_with_inputs(parser):
    args = parser.parse_args(["f", ".env", "-s", "UnorderedKey"])
    assert args.command == "fix"
    assert args.input == [".env"]
    assert args.skip == ["UnorderedKey"]
    assert args.no_backup is False


def test_list_command(parser):
    assert parser.parse_args(["list"]).command == "list"
    assert parser.parse_args(["l"]).command == "list"


def test_list_rejects_extra_arguments(parser):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["list", ".env"])
    assert excinfo.value.code == 2


def test_top_level_flag_before_command(parser):
    args = parser.parse_args(["--not-check-updates", "-q", "fix"])
    assert args.command == "fix"
    assert args.not_check_updates is True
    assert args.quiet is True


def test_command_name_after_input_is_an_input(parser):
    args = parser.parse_args([".env", "list"])
    assert args.command is None
    assert args.input == [".env", "list"]


def test_version_flag(parser, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["-v"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("envlint ")


def test_version_flag_on_subcommand(parser, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["list", "--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("envlint list ")


def test_unknown_option_is_an_error(parser):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["--bogus"])
    assert excinfo.value.code == 2