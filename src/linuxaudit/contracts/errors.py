# src/linuxaudit/contracts/errors.py
"""Error contracts shared across the parser, pool and host layers.

StatsError is the batch-level summary. It is an Exception so hosts can
raise it, but the parser only ever returns it: a batch with errors is a
partial success, never an abort.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class StatsError(Exception):
    """Aggregate statistics for one parsed batch.

    Attributes:
        success: Lines that produced a non-empty record
        errors: Lines that failed or produced no data
        last_error: Message of the most recent error in input order
        datasource_skip_index: Original indices that produced no output row
            (blank input, or an erroring line whose data was not recorded)
    """

    success: int = 0
    errors: int = 0
    last_error: str = ""
    datasource_skip_index: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        super().__init__(self.last_error)

    def add_success(self) -> None:
        self.success += 1

    def add_error(self, message: str) -> None:
        self.errors += 1
        self.last_error = message

    def skip(self, index: int) -> None:
        self.datasource_skip_index.append(index)

    def __str__(self) -> str:
        return f"success {self.success} errors {self.errors} last error {self.last_error}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "errors": self.errors,
            "last_error": self.last_error,
            "datasource_skip_index": list(self.datasource_skip_index),
        }


class ParserConfigError(Exception):
    """Raised when parser configuration is invalid."""

    pass


class UnknownParserError(LookupError):
    """Raised when a parser type is not registered."""

    def __init__(self, parser_type: str, available: list[str]) -> None:
        super().__init__(f"Unknown parser type '{parser_type}'. Available: {sorted(available)}")
        self.parser_type = parser_type
        self.available = available
