"""Structured Logging — JSON formatter plus explicit setup/shutdown of log handlers.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (error_code, path, entity, entity_id) surfaced when present
    - setup_logging called once on startup, shutdown_logging once on shutdown (lifespan)
    - Handlers created by setup_logging are the only ones shutdown_logging touches

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - Optional file transports split by level: info file gets INFO+, error file gets ERROR+
    - Loggers reach request handlers through their constructor (get_handler_logger),
      never through a module-level global
"""

import logging
import json
from datetime import datetime, timezone

LOGGER_NAMESPACE = "delivery_api"

_EXTRA_KEYS = ("error_code", "path", "entity", "entity_id")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def _build_formatter(fmt: str) -> logging.Formatter:
    if fmt == "json":
        return JSONFormatter()
    return logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s - %(message)s",
        datefmt="%d-%m-%Y %H:%M:%S",
    )


def setup_logging(
    level: str = "INFO",
    fmt: str = "json",
    info_file: str | None = None,
    error_file: str | None = None,
) -> list[logging.Handler]:
    """Configure logging for the application. Returns the installed handlers."""
    formatter = _build_formatter(fmt)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if info_file:
        info_handler = logging.FileHandler(info_file, encoding="utf-8")
        info_handler.setLevel(logging.INFO)
        handlers.append(info_handler)
    if error_file:
        error_handler = logging.FileHandler(error_file, encoding="utf-8")
        error_handler.setLevel(logging.ERROR)
        handlers.append(error_handler)

    for handler in handlers:
        handler.setFormatter(formatter)
        logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handlers


def shutdown_logging(handlers: list[logging.Handler]) -> None:
    """Flush, close and detach handlers installed by setup_logging."""
    for handler in handlers:
        handler.flush()
        handler.close()
        logging.root.removeHandler(handler)


def get_handler_logger(component: str) -> logging.Logger:
    """Logger injected into a request handler class."""
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{component}")
