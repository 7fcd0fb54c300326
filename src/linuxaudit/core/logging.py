# src/linuxaudit/core/logging.py
"""Logging setup for linuxaudit hosts.

Parser modules only ever call get_logger(__name__) and emit events with
key/value context (``logger.warning("line_parse_failed", index=3)``).
Where those events end up is decided once, by the host, through
configure_logging().

Both structlog events and plain stdlib records pass through the same
ProcessorFormatter on a single root handler, so a third-party library
logging with logging.getLogger() renders exactly like parser events.
Everything goes to stderr: stdout is reserved for parsed rows.
"""

import logging
import sys
from typing import Any, TextIO

import structlog
from structlog.stdlib import ProcessorFormatter

# Libraries whose DEBUG chatter is capped at WARNING.
_NOISY_LOGGERS: tuple[str, ...] = (
    "dynaconf",
    "pluggy",
)


def _drop_formatter_keys(
    logger: logging.Logger | None,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Strip the bookkeeping keys ProcessorFormatter injects into every event."""
    del event_dict["_record"]
    del event_dict["_from_structlog"]
    return event_dict


def _resolve_level(level: str) -> int:
    """Map a level name (any case) to its numeric value.

    Raises:
        ValueError: If the name is not a stdlib logging level.
    """
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def _event_chain() -> list[Any]:
    """Processors run on every event before rendering."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
    ]


def _render_chain(json_output: bool) -> list[Any]:
    if json_output:
        return [
            _drop_formatter_keys,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    # Plain text: stderr is often a file or a pipe
    return [_drop_formatter_keys, structlog.dev.ConsoleRenderer(colors=False)]


def configure_logging(
    *,
    json_output: bool = False,
    level: str = "INFO",
    stream: TextIO | None = None,
) -> None:
    """Route structlog and stdlib logging to one stream.

    Safe to call repeatedly: the root handler is replaced, not added to.

    Args:
        json_output: One JSON object per event instead of console text.
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR).
        stream: Where to write; sys.stderr when omitted.

    Raises:
        ValueError: If level is not a known logging level name.
    """
    log_level = _resolve_level(level)
    event_chain = _event_chain()

    structlog.configure(
        processors=[*event_chain, ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Uncached so a later configure_logging() call takes effect everywhere
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(ProcessorFormatter(processors=_render_chain(json_output), foreign_pre_chain=event_chain))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(log_level)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return the structlog logger for a module (pass __name__)."""
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger
