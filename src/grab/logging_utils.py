"""Centralized logging utilities for grab entry points."""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOG_LEVEL_CHOICES = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_PLAIN_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
_TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(log_level: str | None, trace_mode: bool = False) -> int:
    """Translate a ``--log-level`` value into a numeric level.

    ``--trace`` always wins and forces DEBUG. Unknown names fall back to WARNING.
    """
    if trace_mode:
        return logging.DEBUG
    if not log_level:
        return logging.WARNING
    level = logging.getLevelName(log_level.upper())
    return level if isinstance(level, int) else logging.WARNING


def _make_formatter(trace_mode: bool) -> logging.Formatter:
    if trace_mode:
        return logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT)
    return logging.Formatter(_PLAIN_FORMAT)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Install grab's log handlers on the root logger.

    Records go to standard error, never standard output, so that search
    results piped into another program stay clean. Any handlers from an
    earlier call are replaced.

    Parameters
    ----------
    log_level : int | str
        Numeric level or level name such as ``"INFO"``; unknown names mean INFO
    log_file : str, optional
        File that receives the same records as standard error (appended to)
    trace_mode : bool, default False
        Prefix records with a timestamp and the emitting module

    Returns
    -------
    logging.Logger
        The root logger

    """
    level = log_level if isinstance(log_level, int) else getattr(logging, str(log_level).upper(), logging.INFO)
    formatter = _make_formatter(trace_mode)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: OSError | None = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            file_error = exc

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if file_error is not None:
        root_logger.warning("Could not open log file %s: %s", log_file, file_error)
    elif log_file:
        root_logger.debug("Writing log records to %s", log_file)

    return root_logger
