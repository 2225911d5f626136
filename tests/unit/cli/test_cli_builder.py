"""Unit tests for the grab argument parser and option building."""

import pytest

from grab.cli import build_options
from grab.cli.builder import FLAG_TO_OPTION, create_parser
from grab.exceptions import InvalidContextLengthError
from grab.options.search import SearchOptions


@pytest.mark.unit
@pytest.mark.cli
class TestCreateParser:
    """Test parsing of command-line arguments."""

    def test_positionals(self):
        """Test pattern and optional input."""
        parser = create_parser()

        args = parser.parse_args(["needle", "haystack.txt"])
        assert args.pattern == "needle"
        assert args.input == "haystack.txt"

        assert parser.parse_args(["needle"]).input is None

    def test_flags_default_to_none(self):
        """Test that unset boolean flags are None so config values survive."""
        args = create_parser().parse_args(["x"])

        for dest in FLAG_TO_OPTION:
            assert getattr(args, dest) is None
        assert args.after_context is None
        assert args.log_level == "WARNING"
        assert not args.no_config

    def test_short_flags(self):
        """Test the single-letter flags."""
        args = create_parser().parse_args(["-c", "-n", "-i", "-v", "-A", "2", "-B", "3", "-C", "4", "x"])

        assert args.count and args.line_number and args.ignore_case and args.invert_match
        assert (args.after_context, args.before_context, args.context) == ("2", "3", "4")

    def test_context_value_kept_as_string(self):
        """Test that context sizes are not converted by argparse."""
        args = create_parser().parse_args(["--after-context", "abc", "x"])

        assert args.after_context == "abc"

    def test_flag_to_option_targets_exist(self):
        """Test that every mapped flag names a SearchOptions field."""
        assert set(FLAG_TO_OPTION.values()) <= SearchOptions.field_names()


@pytest.mark.unit
@pytest.mark.cli
class TestBuildOptions:
    """Test conversion of parsed arguments to SearchOptions."""

    def test_flags_become_options(self):
        """Test that flags map onto option fields."""
        args = create_parser().parse_args(["--no-config", "--color", "-n", "--group-separator", "##", "x"])
        options = build_options(args)

        assert options.colorize
        assert options.line_number
        assert options.group_separator == "##"
        assert not options.count

    def test_context_parsed(self):
        """Test that context strings become integers."""
        args = create_parser().parse_args(["--no-config", "-C", "+2", "x"])

        assert build_options(args).context == 2

    def test_bad_context_raises(self):
        """Test that a malformed context size raises."""
        args = create_parser().parse_args(["--no-config", "-B", "two", "x"])

        with pytest.raises(InvalidContextLengthError) as exc_info:
            build_options(args)

        assert exc_info.value.parameter_name == "before_context"

    def test_flags_override_config(self, isolated_config):
        """Test that command-line flags override configuration values."""
        (isolated_config / ".grab.toml").write_text(
            'line_number = true\ngroup_separator = "~~"\n', encoding="utf-8"
        )
        args = create_parser().parse_args(["--group-separator", "!!", "x"])
        options = build_options(args)

        assert options.line_number
        assert options.group_separator == "!!"
