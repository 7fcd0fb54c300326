# src/linuxaudit/contracts/records.py
"""Record and per-line outcome types.

These types answer: "What did a line produce?"

A Record is a plain insertion-ordered dict so it serializes directly
to JSON. LineOutcome correlates a worker result with the original line
index so the collector can restore input order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

# Values are strings or nested records produced from quoted sub-messages.
Record: TypeAlias = dict[str, "str | Record"]

# Field holding the raw text of a line that failed to parse.
KEY_PANDORA_STASH = "pandora_stash"

# Field holding the raw line when keep_raw_data is enabled.
KEY_RAW_DATA = "raw_data"


@dataclass(frozen=True)
class LineOutcome:
    """Result of parsing one line, correlated to its input position.

    Exactly one of ``record`` / ``error`` is set, or neither for a blank
    line (the skip marker).

    Attributes:
        index: Position of the line in the submitted batch
        line: The whitespace-trimmed line the worker parsed
        record: Parsed record (may be empty) on success
        error: Exception raised by the parse function
    """

    index: int
    line: str
    record: Record | None = None
    error: Exception | None = None

    def __post_init__(self) -> None:
        if self.record is not None and self.error is not None:
            raise ValueError(f"LineOutcome {self.index} cannot carry both a record and an error")

    @property
    def is_blank(self) -> bool:
        """True when the line was empty after trimming."""
        return self.record is None and self.error is None

    @classmethod
    def blank(cls, index: int, line: str) -> LineOutcome:
        return cls(index=index, line=line)

    @classmethod
    def success(cls, index: int, line: str, record: Record) -> LineOutcome:
        return cls(index=index, line=line, record=record)

    @classmethod
    def failure(cls, index: int, line: str, error: Exception) -> LineOutcome:
        return cls(index=index, line=line, error=error)
