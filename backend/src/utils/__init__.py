"""
Utility modules for the performance records backend.

This package contains shared utilities used across the application:
- logging_config: Named loggers with console/JSON output
"""

from backend.src.utils.logging_config import get_logger, init_logging, log_fields

__all__ = [
    "get_logger",
    "init_logging",
    "log_fields",
]
