# src/linuxaudit/parser/__init__.py
"""Linux audit line parsing: tokenizer, timestamp extraction, key resolution, aggregation."""

from linuxaudit.parser.aggregator import aggregate
from linuxaudit.parser.keys import MAX_KEY_ATTEMPTS, set_field
from linuxaudit.parser.lines import join_continuation_lines
from linuxaudit.parser.linux_audit import TYPE_LINUX_AUDIT, LinuxAuditParser
from linuxaudit.parser.timestamp import extract_timestamp_id
from linuxaudit.parser.tokenizer import MAX_SUBMESSAGE_DEPTH, ScanState, tokenize

__all__ = [
    "MAX_KEY_ATTEMPTS",
    "MAX_SUBMESSAGE_DEPTH",
    "TYPE_LINUX_AUDIT",
    "LinuxAuditParser",
    "ScanState",
    "aggregate",
    "extract_timestamp_id",
    "join_continuation_lines",
    "set_field",
    "tokenize",
]
