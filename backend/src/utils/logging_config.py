"""
Structured logging configuration for the performance records backend.

Provides JSON-formatted logging with file rotation for production environments
and human-readable console logging for development.

Loggers:
- services: Business logic operations (performance create/update/delete)
- db: Record store operations and failures
- remote: Remote folder service calls (Google Drive, local folders)
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional
import json
from datetime import datetime, timezone


LOGGER_PREFIX = "perfrec"
LOGGER_NAMES = ["services", "db", "remote"]


class JSONFormatter(logging.Formatter):
    """
    Custom formatter that outputs logs as JSON for structured logging.

    Each log record includes:
    - timestamp: ISO 8601 format
    - level: Log level (INFO, ERROR, etc.)
    - logger: Logger name (perfrec.services, perfrec.db, ...)
    - message: Log message
    - module, function, line: Call site
    - Additional fields: exception info, extra fields
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON string."""
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # logger.info("msg", extra={"extra_fields": {...}})
        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        return json.dumps(log_data, default=str)


class ConsoleFormatter(logging.Formatter):
    """
    Human-readable formatter for console output in development.

    Example: [2025-12-29 10:30:45] INFO - perfrec.services - Created performance: ...
    """

    def __init__(self):
        super().__init__(
            fmt="[%(asctime)s] %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )


def _get_log_level() -> int:
    """Log level from PERFREC_LOG_LEVEL (default INFO)."""
    level_str = os.environ.get("PERFREC_LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_str, logging.INFO)


def _get_log_dir() -> Path:
    """Log directory from PERFREC_LOG_DIR (default ./logs), created if missing."""
    log_dir = Path(os.environ.get("PERFREC_LOG_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _is_production() -> bool:
    env = os.environ.get("PERFREC_ENV", "development").lower()
    return env == "production"


def configure_logging() -> Dict[str, logging.Logger]:
    """
    Configure the named loggers.

    Behavior:
    - Production (PERFREC_ENV=production):
      * JSON-formatted logs to one rotating file per logger
        (services.log, db.log, remote.log), 10MB max size, 5 backups
    - Development (default):
      * Human-readable console output, no file logging

    Returns:
        Dictionary mapping short logger names to configured Logger instances
    """
    log_level = _get_log_level()
    is_prod = _is_production()
    log_dir = _get_log_dir() if is_prod else None

    loggers = {}

    for logger_name in LOGGER_NAMES:
        logger = logging.getLogger(f"{LOGGER_PREFIX}.{logger_name}")
        logger.setLevel(log_level)
        logger.propagate = False
        logger.handlers.clear()

        if is_prod:
            file_handler = logging.handlers.RotatingFileHandler(
                log_dir / f"{logger_name}.log",
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5,
                encoding="utf-8"
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(JSONFormatter())
            logger.addHandler(file_handler)
        else:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(log_level)
            console_handler.setFormatter(ConsoleFormatter())
            logger.addHandler(console_handler)

        loggers[logger_name] = logger

    return loggers


_loggers: Optional[Dict[str, logging.Logger]] = None


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger by short name.

    Dotted names return a child of a configured logger, e.g. "remote.drive"
    is perfrec.remote.drive and writes through the handlers of perfrec.remote.

    Args:
        name: Logger name (services, db, remote, or a child such as remote.drive)

    Returns:
        Configured Logger instance

    Raises:
        ValueError: If logger name is not recognized

    Example:
        >>> logger = get_logger("services")
        >>> logger.info("Performance created", extra={"extra_fields": {"id": "pfm_..."}})
    """
    global _loggers

    if _loggers is None:
        _loggers = configure_logging()

    base_name, _, child_name = name.partition(".")
    if base_name not in _loggers:
        raise ValueError(
            f"Unknown logger name: {name}. "
            f"Valid names: {', '.join(_loggers.keys())}"
        )

    if child_name:
        return _loggers[base_name].getChild(child_name)
    return _loggers[base_name]


def init_logging() -> Dict[str, logging.Logger]:
    """(Re)initialize logging configuration, e.g. on application startup."""
    global _loggers
    _loggers = configure_logging()
    return _loggers


def log_fields(**fields: Any) -> Dict[str, Dict[str, Any]]:
    """
    Build the ``extra`` argument carrying structured fields for JSONFormatter.

    Example:
        >>> logger.info("Deleted performance", extra=log_fields(performance_id="pfm_..."))
    """
    return {"extra_fields": fields}
