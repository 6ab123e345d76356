"""
Logging configuration for the scriptmeta CLI.

Only the ``scriptmeta`` package logger is configured; the root logger and
any handlers a host application installed are left alone.  The scanner
logs ignored header candidates at DEBUG and the extractor logs each
dependency block it consumes at INFO, so ``-v`` shows which blocks were
used and ``--debug`` shows why a ``##`` line did not open a block.

Levels are resolved in precedence order:
    CLI flag  >  SCRIPTMETA_LOG_LEVEL env var  >  WARNING (default)

Optional file output via SCRIPTMETA_LOG_FILE / SCRIPTMETA_LOG_FILE_LEVEL.
"""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "scriptmeta"

# Console formats by verbosity; anything above INFO prints the bare message
_CONSOLE_FORMATS = (
    (logging.DEBUG, "%(levelname)-5s %(name)s:%(lineno)d — %(message)s"),
    (logging.INFO, "[%(name)s] %(message)s"),
)
_FMT_FILE = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> logging.Logger:
    """Configure the ``scriptmeta`` logger for one CLI run.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to a log file.
        log_file_level: Optional separate level for the log file.
            Defaults to the same as ``level``.

    Returns:
        The configured package logger.
    """
    console_level = _parse_level(level)
    logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(_console_format(console_level)))
    logger.addHandler(console)

    effective_level = console_level
    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        effective_level = min(effective_level, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_FILE, datefmt=_DATEFMT_FILE))
        logger.addHandler(fh)

    logger.setLevel(effective_level)
    logger.propagate = False
    return logger


def _console_format(level: int) -> str:
    for threshold, fmt in _CONSOLE_FORMATS:
        if level <= threshold:
            return fmt
    return "%(message)s"


def _parse_level(level: str | None) -> int:
    """Convert a level name string to its numeric constant."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
