# src/linuxaudit/parser/linux_audit.py
"""LinuxAuditParser - batch parser for Linux audit log lines.

Ties the pieces together: the dispatcher fans lines out to the tokenizer,
restores input order, and the aggregator applies the keep/skip policy.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from linuxaudit.contracts.errors import StatsError
from linuxaudit.contracts.records import Record
from linuxaudit.core.config import ParserSettings
from linuxaudit.core.logging import get_logger
from linuxaudit.parser.aggregator import aggregate
from linuxaudit.parser.tokenizer import tokenize
from linuxaudit.pooling import LineDispatcher, PoolConfig

logger = get_logger(__name__)

TYPE_LINUX_AUDIT = "linuxaudit"


class LinuxAuditParser:
    """Parses batches of audit lines into records.

    A batch with failing lines is a partial success: parse() returns the
    rows of every good line together with a StatsError summarizing the
    failures. It never raises for bad input.

    Usage:
        parser = LinuxAuditParser(ParserSettings(keep_raw_data=True))
        rows, stats = parser.parse(lines)
        if stats is not None:
            print(stats.errors, stats.last_error)
    """

    type = TYPE_LINUX_AUDIT

    def __init__(self, settings: ParserSettings | None = None) -> None:
        self._settings = settings if settings is not None else ParserSettings()
        self._dispatcher = LineDispatcher(PoolConfig(pool_size=self._settings.effective_parallelism))

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> LinuxAuditParser:
        """Create a parser from a plain configuration mapping.

        Raises:
            ParserConfigError: If configuration is invalid.
        """
        return cls(ParserSettings.from_dict(config))

    @property
    def name(self) -> str:
        return self._settings.name

    @property
    def settings(self) -> ParserSettings:
        return self._settings

    @property
    def dispatcher(self) -> LineDispatcher:
        return self._dispatcher

    def parse_line(self, line: str) -> Record:
        """Tokenize a single line (no trimming, no policy)."""
        return tokenize(line)

    def parse(self, lines: Sequence[str]) -> tuple[list[Record], StatsError | None]:
        """Parse a batch of lines.

        Args:
            lines: Ordered logical audit lines

        Returns:
            Tuple of (rows in input order, StatsError or None when every
            non-blank line produced data)
        """
        outcomes = self._dispatcher.dispatch(lines, tokenize)
        rows, stats = aggregate(
            outcomes,
            keep_raw_data=self._settings.keep_raw_data,
            disable_record_err_data=self._settings.disable_record_err_data,
        )

        if stats is not None:
            logger.warning(
                "batch_parsed_with_errors",
                parser=self.name,
                lines=len(lines),
                rows=len(rows),
                errors=stats.errors,
                last_error=stats.last_error,
            )
        else:
            logger.debug("batch_parsed", parser=self.name, lines=len(lines), rows=len(rows))
        return rows, stats

    def server_config(self) -> dict[str, Any]:
        """Describe where this parser runs for a collecting server."""
        return {
            "type": TYPE_LINUX_AUDIT,
            "process_at": "server",
            "key": "arr",
        }
