"""Command-line interface for grab.

Searches a file (or standard input) for a regular expression and prints the
matching lines, optionally with line numbers, highlighting and context.

Examples
--------
Basic search::

    $ grab "error" server.log

Count matching lines::

    $ grab -c "error" server.log

Two lines of trailing context with line numbers::

    $ grab -n -A 2 "Traceback" server.log

Read from standard input, case-insensitively, with highlighting::

    $ dmesg | grab -i --color "usb"

Configuration files (``.grab.toml``, ``.grab.yaml``, ``.grab.json`` or a
``[tool.grab]`` table in ``pyproject.toml``) supply defaults for any
:class:`~grab.options.SearchOptions` field; command-line flags override them.
The ``GRAB_CONFIG`` environment variable names a configuration file explicitly.

"""

import argparse
import logging
import os
import sys

from grab.cli.builder import EXIT_ERROR, EXIT_SUCCESS, FLAG_TO_OPTION, create_parser
from grab.cli.config import apply_config, load_config_with_priority
from grab.constants import CONFIG_ENV_VAR
from grab.exceptions import GrabError
from grab.logging_utils import configure_logging, resolve_log_level
from grab.options.search import CONTEXT_FIELDS, SearchOptions, parse_context_length
from grab.search.service import SearchService
from grab.search.source import LineSource

logger = logging.getLogger(__name__)

__all__ = [
    "main",
    "build_options",
    "create_parser",
]


def _setup_logging(parsed_args: argparse.Namespace) -> None:
    """Set up logging from ``--log-level``, ``--log-file`` and ``--trace``."""
    log_level = resolve_log_level(parsed_args.log_level, trace_mode=parsed_args.trace)
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def build_options(parsed_args: argparse.Namespace) -> SearchOptions:
    """Combine configuration-file values and command-line flags into SearchOptions.

    Context sizes given on the command line replace every context setting
    from the configuration file, so a file's ``context = 2`` never shadows
    an explicit ``-A 1``.

    Raises
    ------
    ConfigError
        If a configuration file is named or discovered but cannot be loaded
    InvalidContextLengthError
        If a context size is not a non-negative integer

    """
    options = SearchOptions()
    if not parsed_args.no_config:
        config = load_config_with_priority(
            explicit_path=parsed_args.config, env_var_path=os.environ.get(CONFIG_ENV_VAR)
        )
        options = apply_config(options, config)

    overrides: dict[str, object] = {}
    for dest, field_name in FLAG_TO_OPTION.items():
        value = getattr(parsed_args, dest, None)
        if value is not None:
            overrides[field_name] = value

    cli_context = {
        name: getattr(parsed_args, name) for name in CONTEXT_FIELDS if getattr(parsed_args, name) is not None
    }
    if cli_context:
        for name in CONTEXT_FIELDS:
            overrides[name] = None
        for name, value in cli_context.items():
            overrides[name] = parse_context_length(value, name)

    if overrides:
        options = options.create_updated(**overrides)
    return options


def main(args: list[str] | None = None) -> int:
    """Execute the grab command line and return the process exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging(parsed_args)

    try:
        options = build_options(parsed_args)
        service = SearchService(parsed_args.pattern, options=options)
        source = LineSource(
            parsed_args.input,
            encoding=options.encoding,
            strict_decoding=options.strict_decoding,
        )
        report = service.run(source, sys.stdout)
    except GrabError as e:
        logger.debug("Search aborted", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    logger.info(
        "%s: %d line(s) selected, %d line(s) written",
        report.mode.name.lower(),
        report.selected_lines,
        report.lines_written,
    )
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
