"""Unified logging configuration for library code and the CLI.

Provides:
    - Console (stderr) and optional file handler, with size rotation
    - Human or JSON-lines output
    - Contextual fields (e.g. canvas="320x240") attached to every record
    - Warning capture (Python warnings → logging)
    - Uncaught exception logging

Public API:
    setup_logging(log_level="INFO", log_file=None, json=False, context={...})
    get_logger(name)
    push_context(canvas="320x240")
    pop_context(keys=["canvas"])
    install_excepthook()

Format examples:
    Human: 2026-10-19T13:45:12.345Z | INFO     | app=render | Canvas exported: 10x20
    JSON:  {"t": "2026-10-19T13:45:12.345000+00:00", "lvl": "INFO", "name": "...", "msg": "..."}

Library modules only call logging.getLogger(__name__); handlers are installed
once by the entry point. Repeated setup_logging() calls replace handlers
instead of stacking them.
"""

import contextvars
import json as jsonlib
import logging
import logging.handlers
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

_context_var = contextvars.ContextVar('logging_context', default={})

_configured = False

_LEVEL_COLORS = {
    'DEBUG': '\033[36m',
    'INFO': '\033[32m',
    'WARNING': '\033[33m',
    'ERROR': '\033[31m',
    'CRITICAL': '\033[35m',
}
_RESET = '\033[0m'


class ContextFormatter(logging.Formatter):
    """Formatter that appends the current context fields.

    Parameters
    ----------
    fmt_mode : str
        "human" (default) or "json"
    use_color : bool
        Colorize the level name; ignored when stderr is not a TTY
    """

    def __init__(self, fmt_mode: str = "human", use_color: bool = True):
        super().__init__()
        if fmt_mode not in ("human", "json"):
            raise ValueError(f"Unknown log format: {fmt_mode}. Use 'human' or 'json'.")
        self.fmt_mode = fmt_mode
        self.use_color = use_color and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        context = _context_var.get()
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)

        if self.fmt_mode == "json":
            entry = {
                't': ts.isoformat(),
                'lvl': record.levelname,
                'name': record.name,
                'pid': os.getpid(),
                'msg': record.getMessage(),
            }
            entry.update(context)
            if record.exc_info:
                entry['exc'] = self.formatException(record.exc_info)
            return jsonlib.dumps(entry, default=str)

        level = f"{record.levelname:8s}"
        if self.use_color:
            level = f"{_LEVEL_COLORS.get(record.levelname, '')}{level}{_RESET}"

        parts = [ts.strftime('%Y-%m-%dT%H:%M:%S.%f')[:-3] + 'Z', '|', level, '|']
        if context:
            parts.append(' '.join(f"{k}={v}" for k, v in context.items()))
            parts.append('|')
        parts.append(record.getMessage())

        line = ' '.join(parts)
        if record.exc_info:
            line += '\n' + self.formatException(record.exc_info)
        return line


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    *,
    json: bool = False,
    color: bool = True,
    to_stderr: bool = True,
    max_bytes: int = 0,
    backup_count: int = 3,
    capture_warnings: bool = True,
    quiet_libs: Optional[List[str]] = None,
    context: Optional[Dict[str, Any]] = None
) -> List[logging.Handler]:
    """Configure the root logger (idempotent).

    Parameters
    ----------
    log_level : str
        "DEBUG", "INFO", "WARNING", "ERROR" or "CRITICAL"
    log_file : str, optional
        Log file path; None for no file logging
    json : bool
        JSON lines in the file handler, default False (console stays human)
    color : bool
        ANSI colors on the console, default True
    to_stderr : bool
        Log to stderr, default True
    max_bytes : int
        Rotate the file at this size; 0 disables rotation
    backup_count : int
        Rotated files to keep
    capture_warnings : bool
        Route Python warnings into logging, default True
    quiet_libs : list[str], optional
        Loggers forced to WARNING (e.g. ["PIL"])
    context : dict, optional
        Initial contextual fields

    Returns
    -------
    list[logging.Handler]
        Handlers installed on the root logger

    Raises
    ------
    ValueError
        If ``log_level`` is not a known level name
    """
    global _configured

    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    root = logging.getLogger()
    if _configured:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)

    handlers: List[logging.Handler] = []

    if to_stderr:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(ContextFormatter("human", color))
        handlers.append(console)

    if log_file:
        handlers.append(_create_file_handler(log_file, json, max_bytes, backup_count))

    for handler in handlers:
        root.addHandler(handler)

    if context:
        push_context(**context)

    for lib in quiet_libs or []:
        logging.getLogger(lib).setLevel(logging.WARNING)

    if capture_warnings:
        logging.captureWarnings(True)

    _configured = True
    return handlers


def _create_file_handler(
    log_file: str,
    json_format: bool,
    max_bytes: int,
    backup_count: int
) -> logging.Handler:
    """File handler, size-rotated when max_bytes > 0."""
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    if max_bytes > 0:
        handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=max_bytes, backupCount=backup_count
        )
    else:
        handler = logging.FileHandler(log_file)

    handler.setFormatter(ContextFormatter("json" if json_format else "human", use_color=False))
    return handler


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def push_context(**kwargs) -> None:
    """Add contextual fields to all subsequent log records."""
    _context_var.set({**_context_var.get(), **kwargs})


def pop_context(keys: Optional[List[str]] = None) -> None:
    """Remove the given context keys, or all of them when ``keys`` is None."""
    if keys is None:
        _context_var.set({})
        return
    current = dict(_context_var.get())
    for key in keys:
        current.pop(key, None)
    _context_var.set(current)


def install_excepthook() -> None:
    """Log uncaught exceptions (except Ctrl+C) at CRITICAL before exit."""
    def log_exception(exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return
        logging.getLogger(__name__).critical(
            "Uncaught exception",
            exc_info=(exc_type, exc_value, exc_traceback)
        )

    sys.excepthook = log_exception
