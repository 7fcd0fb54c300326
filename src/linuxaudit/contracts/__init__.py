"""Shared contracts for cross-boundary data types.

This package is a LEAF MODULE with no outbound dependencies to core,
parser or pooling. Settings classes are NOT re-exported here - import
them from linuxaudit.core.config.
"""

from linuxaudit.contracts.errors import ParserConfigError, StatsError, UnknownParserError
from linuxaudit.contracts.records import KEY_PANDORA_STASH, KEY_RAW_DATA, LineOutcome, Record

__all__ = [
    "KEY_PANDORA_STASH",
    "KEY_RAW_DATA",
    "LineOutcome",
    "ParserConfigError",
    "Record",
    "StatsError",
    "UnknownParserError",
]
