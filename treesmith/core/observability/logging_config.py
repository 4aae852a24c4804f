"""
Logging configuration — one setup call per process.

The CLI root group and the web server both go through
:func:`configure_from_flags`. Modules only ever do
``logger = logging.getLogger(__name__)``.

Console level precedence:
    --debug  >  --verbose  >  --quiet  >  TREESMITH_LOG_LEVEL  >  WARNING

A log file is added when TREESMITH_LOG_FILE is set; its level comes from
TREESMITH_LOG_FILE_LEVEL and defaults to the console level.
"""

from __future__ import annotations

import logging
import os
import sys

ENV_LEVEL = "TREESMITH_LOG_LEVEL"
ENV_FILE = "TREESMITH_LOG_FILE"
ENV_FILE_LEVEL = "TREESMITH_LOG_FILE_LEVEL"

# ── Formats, most verbose first ─────────────────────────────────

_CONSOLE_FORMATS: tuple[tuple[int, str, str | None], ...] = (
    # DEBUG: level plus file:line
    (logging.DEBUG, "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%H:%M:%S"),
    # INFO: timestamp and logger name, one line per plan entry
    (logging.INFO, "%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
    # WARNING and above: the message only
    (logging.CRITICAL, "%(message)s", None),
)

_FILE_FORMAT = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Request logging from the dev server drowns out plan output
_NOISY_LOGGERS = ("werkzeug", "urllib3")


def resolve_level(
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> str:
    """Pick the console level name from CLI flags and the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return os.environ.get(ENV_LEVEL, "WARNING")


def configure_from_flags(
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> None:
    """Resolve flags and environment, then call :func:`setup_logging`."""
    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(ENV_FILE),
        log_file_level=os.environ.get(ENV_FILE_LEVEL),
        quiet_third_party=not debug,
    )


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
    quiet_third_party: bool = True,
) -> None:
    """Configure the root logger.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path of a log file.
        log_file_level: Level for the file; defaults to ``level``.
        quiet_third_party: Hold noisy library loggers at WARNING unless
            the console runs at DEBUG.
    """
    console_level = _to_level(level)
    fmt, datefmt = _console_format(console_level)
    handlers: list[logging.Handler] = [
        _with_format(logging.StreamHandler(sys.stderr), console_level, fmt, datefmt),
    ]

    if log_file:
        file_level = _to_level(log_file_level) if log_file_level else console_level
        handlers.append(_with_format(
            logging.FileHandler(log_file, encoding="utf-8"),
            file_level, _FILE_FORMAT, _FILE_DATEFMT,
        ))

    root = logging.getLogger()
    root.handlers.clear()
    for handler in handlers:
        root.addHandler(handler)
    # Root passes whatever the most verbose handler accepts
    root.setLevel(min(h.level for h in handlers))

    if quiet_third_party and console_level > logging.DEBUG:
        for noisy in _NOISY_LOGGERS:
            logging.getLogger(noisy).setLevel(logging.WARNING)

    logging.raiseExceptions = False


def _console_format(level: int) -> tuple[str, str | None]:
    for threshold, fmt, datefmt in _CONSOLE_FORMATS:
        if level <= threshold:
            return fmt, datefmt
    return _CONSOLE_FORMATS[-1][1], _CONSOLE_FORMATS[-1][2]


def _with_format(
    handler: logging.Handler, level: int, fmt: str, datefmt: str | None
) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    return handler


def _to_level(name: str | None) -> int:
    """Level name → numeric constant, WARNING for anything unknown."""
    value = logging.getLevelName(name.upper()) if name else None
    return value if isinstance(value, int) else logging.WARNING
