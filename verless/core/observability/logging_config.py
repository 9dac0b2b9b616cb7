"""
Logging configuration — one-time setup for the verless CLI.

Called once at startup by ``verless.main``.  Modules log through
``logger = logging.getLogger(__name__)`` and inherit this config.

Level precedence:
    CLI flag  >  VERLESS_LOG_LEVEL env var  >  WARNING

Optional file output via VERLESS_LOG_FILE / VERLESS_LOG_FILE_LEVEL.
"""

from __future__ import annotations

import logging
import sys

# WARNING and above: just the message
_FMT_PLAIN = "%(message)s"

# INFO: timestamp and logger name
_FMT_INFO = "%(asctime)s [%(name)s] %(message)s"

# DEBUG and log files: level and source line as well
_FMT_DETAIL = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"

_DATEFMT_CONSOLE = "%H:%M:%S"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"

_NOISY_LOGGERS = ("urllib3", "asyncio")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
    quiet_third_party: bool = True,
) -> None:
    """Configure the root logger for the whole process.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional file to log to as well.
        log_file_level: Level for the log file, defaults to ``level``.
        quiet_third_party: Keep noisy library loggers at WARNING unless
            running at DEBUG.
    """
    console_level = parse_level(level)

    if console_level <= logging.DEBUG:
        fmt, datefmt = _FMT_DETAIL, _DATEFMT_CONSOLE
    elif console_level <= logging.INFO:
        fmt, datefmt = _FMT_INFO, _DATEFMT_CONSOLE
    else:
        fmt, datefmt = _FMT_PLAIN, None

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)

    root_level = console_level

    if log_file:
        file_level = parse_level(log_file_level) if log_file_level else console_level
        root_level = min(root_level, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_DETAIL, datefmt=_DATEFMT_FILE))
        root.addHandler(fh)

    root.setLevel(root_level)

    if quiet_third_party and console_level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def parse_level(level: str | None) -> int:
    """Convert a level name to its numeric value, WARNING if unknown."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
