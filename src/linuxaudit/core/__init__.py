# src/linuxaudit/core/__init__.py
"""Core infrastructure: Configuration, Logging, Time normalization."""

from linuxaudit.core.config import ParserSettings, default_parallelism, load_settings
from linuxaudit.core.logging import configure_logging, get_logger
from linuxaudit.core.timeparse import format_timestamp, parse_timestamp

__all__ = [
    "ParserSettings",
    "configure_logging",
    "default_parallelism",
    "format_timestamp",
    "get_logger",
    "load_settings",
    "parse_timestamp",
]
