"""Logging for the shop and ordering domains.

Both domain modules call ``configure_logging()`` at import, so it runs once per
process and later calls are no-ops unless ``force=True``. Stdlib logging owns
the handlers (console, ``foodorder.log`` and ``foodorder_error.log``); structlog
renders on top of it: coloured console output in development, JSON lines in
staging and production.

Environment: ``ENVIRONMENT`` (falls back to ``PROTEAN_ENV``), ``LOG_LEVEL``,
``LOG_DIR``.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog

LOG_FILE = "foodorder.log"
ERROR_LOG_FILE = "foodorder_error.log"
MAX_LOG_BYTES = 10 * 1024 * 1024

_DEFAULT_LEVELS = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}
_JSON_ENVIRONMENTS = {"production", "staging"}
_QUIET_LOGGERS = ("urllib3", "asyncio", "protean")

_configured = False
_installed: list[logging.Handler] = []


def current_environment() -> str:
    return (os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


def log_level(environment: str) -> str:
    return os.getenv("LOG_LEVEL", _DEFAULT_LEVELS.get(environment, "INFO")).upper()


def _rotating(path: Path, level) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=MAX_LOG_BYTES,
        backupCount=5,
        encoding="utf-8",
    )
    handler.setLevel(level)
    return handler


def _install_handlers(level: str) -> None:
    log_dir = Path(os.getenv("LOG_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    # Only our own handlers are replaced; the old files are closed first
    while _installed:
        handler = _installed.pop()
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    _installed.extend(
        [
            console,
            _rotating(log_dir / LOG_FILE, level),
            _rotating(log_dir / ERROR_LOG_FILE, logging.ERROR),
        ]
    )
    for handler in _installed:
        root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _renderer(environment: str):
    if environment in _JSON_ENVIRONMENTS:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=True,
        exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=True, max_frames=2),
    )


def configure_logging(force: bool = False) -> None:
    """Install handlers and structlog processors once per process."""
    global _configured
    if _configured and not force:
        return

    environment = current_environment()
    _install_handlers(log_level(environment))

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            _renderer(environment),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _configured = True


def add_context(**kwargs: Any) -> None:
    """Bind request-scoped values (user_id, menu_id, ...) onto every later log line."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
