"""Logging for the Aurum domain.

Standard library logging owns the handlers: stdout plus ``aurum.log`` and
``aurum_error.log`` under ``LOG_DIR``. structlog renders on top of it, as
JSON in production and through the coloured console renderer elsewhere.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog

_LEVELS = {"production": "INFO", "development": "DEBUG", "test": "WARNING"}
_MAX_BYTES = 10 * 1024 * 1024

_configured = False


def current_env() -> str:
    return (os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


def _rotating_handler(path: Path, level) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(filename=path, maxBytes=_MAX_BYTES, backupCount=5, encoding="utf-8")
    handler.setLevel(level)
    return handler


def _renderers():
    if current_env() == "production":
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [
        structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=True, max_frames=2),
        )
    ]


def configure_logging(log_dir: str | None = None, force: bool = False) -> None:
    """Wire handlers and structlog. Runs once per process unless forced."""
    global _configured
    if _configured and not force:
        return

    level = os.getenv("LOG_LEVEL", _LEVELS.get(current_env(), "INFO"))
    log_path = Path(log_dir or os.getenv("LOG_DIR", "logs"))
    log_path.mkdir(parents=True, exist_ok=True)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = [
        console,
        _rotating_handler(log_path / "aurum.log", level),
        _rotating_handler(log_path / "aurum_error.log", logging.ERROR),
    ]
    # Protean logs every unit of work at DEBUG
    logging.getLogger("protean").setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            *_renderers(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _configured = True


def add_context(**kwargs: Any) -> None:
    """Bind values (the shopper session, the verified pincode) to every later log line."""
    structlog.contextvars.bind_contextvars(**kwargs)
