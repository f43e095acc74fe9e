#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/nbast/logging_utils.py
"""Logging setup for the ``nbast`` command.

Library modules only create module-level loggers under the ``nbast``
namespace and never install handlers. ``configure_logging`` is called once
by the CLI to attach a stderr handler (and optionally a log file) to the
root logger.

In trace mode the records carry timestamps plus the emitting function and
line, and Python warnings (BeautifulSoup reports suspicious markup through
``warnings``) are routed into the log. Outside trace mode the third-party
loggers of the processing engines stay at WARNING whatever level is
requested for nbast itself.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "nbast"

DEFAULT_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s:%(funcName)s:%(lineno)d] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers of libraries nbast drives; kept quiet unless tracing
ENGINE_LOGGERS = ("bs4", "mistune", "rich")


def resolve_log_level(log_level: int | str) -> int:
    """Turn a level name such as ``"debug"`` into its numeric value (INFO when unknown)."""
    if isinstance(log_level, int):
        return log_level
    level = getattr(logging, str(log_level).upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Configure root logging handlers for the command line interface.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Path of a file that receives the same records as stderr.
    trace_mode : bool, default False
        Use the detailed trace format and capture Python warnings.

    Returns
    -------
    logging.Logger
        The ``nbast`` package logger.

    """
    resolved_level = resolve_log_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)
    root_logger.handlers.clear()

    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(DEFAULT_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    engine_level = resolved_level if trace_mode else max(resolved_level, logging.WARNING)
    for name in ENGINE_LOGGERS:
        logging.getLogger(name).setLevel(engine_level)

    logging.captureWarnings(trace_mode)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(resolved_level)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(resolved_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            package_logger.info("Logging to file: %s", log_file)

    return package_logger
