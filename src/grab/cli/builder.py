#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Argument parser construction and exit codes for the grab CLI."""

import argparse

from grab.constants import CONFIG_ENV_VAR, DEFAULT_ENCODING, DEFAULT_GROUP_SEPARATOR
from grab.logging_utils import LOG_LEVEL_CHOICES

EXIT_SUCCESS = 0
EXIT_ERROR = 1

# Maps ``--flag`` destinations to SearchOptions field names
FLAG_TO_OPTION = {
    "count": "count",
    "line_number": "line_number",
    "color": "colorize",
    "ignore_case": "ignore_case",
    "invert_match": "invert_match",
    "merge_groups": "merge_groups",
    "strict_decoding": "strict_decoding",
    "group_separator": "group_separator",
    "encoding": "encoding",
}


def create_parser() -> argparse.ArgumentParser:
    """Create the ``grab`` argument parser.

    Boolean flags default to ``None`` rather than ``False`` so that values
    loaded from a configuration file are only overridden by flags that were
    actually given. Context sizes are kept as strings and validated later so
    that a bad value is reported as an invalid context length.
    """
    from grab import __version__

    parser = argparse.ArgumentParser(
        prog="grab",
        description="Searches for patterns. Prints lines that match those patterns to the standard output.",
        epilog=f"Configuration is read from .grab.toml/.grab.yaml/.grab.json, [tool.grab] in pyproject.toml, "
        f"or the file named by ${CONFIG_ENV_VAR}.",
    )
    parser.add_argument("pattern", help="The pattern to search for")
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="File to search in. This is optional. If omitted (or '-'), takes input from STDIN",
    )
    parser.add_argument(
        "-c",
        "--count",
        action="store_true",
        default=None,
        help="Suppresses normal output and instead prints number of matching lines",
    )
    parser.add_argument(
        "-n",
        "--line-number",
        dest="line_number",
        action="store_true",
        default=None,
        help="Prefixes each line of output with the 1-based line number within its input file",
    )
    parser.add_argument(
        "--color",
        action="store_true",
        default=None,
        help="Highlights the matched terms, line numbers and group separators",
    )
    parser.add_argument(
        "-i",
        "--ignore-case",
        dest="ignore_case",
        action="store_true",
        default=None,
        help="Ignores case distinctions in patterns and input data",
    )
    parser.add_argument(
        "-v",
        "--invert-match",
        dest="invert_match",
        action="store_true",
        default=None,
        help="Inverts the sense of matching, to select non-matching lines",
    )

    context_group = parser.add_argument_group("context control")
    context_group.add_argument(
        "-A",
        "--after-context",
        dest="after_context",
        metavar="NUM",
        help="Prints NUM lines of trailing context after the matching lines",
    )
    context_group.add_argument(
        "-B",
        "--before-context",
        dest="before_context",
        metavar="NUM",
        help="Prints NUM lines of leading context before the matching lines",
    )
    context_group.add_argument(
        "-C",
        "--context",
        dest="context",
        metavar="NUM",
        help="Prints NUM lines of context before and after the matching lines",
    )
    context_group.add_argument(
        "--group-separator",
        dest="group_separator",
        metavar="SEP",
        help=f"Use SEP as a group separator (default: {DEFAULT_GROUP_SEPARATOR})",
    )
    context_group.add_argument(
        "--merge-groups",
        dest="merge_groups",
        action="store_true",
        default=None,
        help="Merge overlapping or adjacent context windows into one group",
    )

    input_group = parser.add_argument_group("input decoding")
    input_group.add_argument(
        "--encoding",
        metavar="ENC",
        help=f"Encoding used to decode input lines (default: {DEFAULT_ENCODING})",
    )
    input_group.add_argument(
        "--strict-decoding",
        dest="strict_decoding",
        action="store_true",
        default=None,
        help="Fail on lines that are not valid text instead of replacing bad bytes",
    )

    config_group = parser.add_argument_group("configuration and logging")
    config_group.add_argument("--config", help="Configuration file to load (overrides discovery)")
    config_group.add_argument(
        "--no-config",
        dest="no_config",
        action="store_true",
        help="Do not load any configuration file",
    )
    config_group.add_argument(
        "--log-level",
        dest="log_level",
        type=str.upper,
        choices=LOG_LEVEL_CHOICES,
        default="WARNING",
        help="Logging level written to standard error (default: WARNING)",
    )
    config_group.add_argument("--log-file", dest="log_file", help="Also write log records to this file")
    config_group.add_argument(
        "--trace",
        action="store_true",
        help="Enable debug logging with timestamps and logger names",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser
