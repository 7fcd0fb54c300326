# src/linuxaudit/parser/tokenizer.py
"""Quote-aware tokenizer for one audit line.

Transcribes ``key=value`` pairs into a Record with a single left-to-right
scan. The scan is an explicit state machine:

    State            Char        Action
    ---------------  ----------  ------------------------------------------
    DEFAULT          '           sub-message handler, reset, -> IN_SINGLE_QUOTE
    DEFAULT          "           -> IN_DOUBLE_QUOTE (quote stripped)
    DEFAULT          =           pending key := buffer, reset buffer
    DEFAULT          whitespace  complete field, reset buffer and key
    DEFAULT          other       append to buffer
    IN_DOUBLE_QUOTE  "           -> DEFAULT (quote stripped)
    IN_DOUBLE_QUOTE  other       same as DEFAULT
    IN_SINGLE_QUOTE  '           -> DEFAULT, key reset, buffer := the quote
    IN_SINGLE_QUOTE  other       ignored (read by the sub-message handler)

Double quotes only mark a span; they never protect its content. Whitespace
and ``=`` inside ``"..."`` still split fields (``comm="my prog"`` stores
``comm=my``), so a stray ``"`` cannot swallow the rest of the line.

The sub-message handler runs on the opening single quote: when nothing has
accumulated for the pending key, the text up to and including the next
``'`` is tokenized recursively and stored as a nested record under that
key (``msg='op=PAM:secret res=success'``). The nested scan ends on that
quote, so sub-messages nest exactly one level deep.

The tokenizer never raises on malformed input; unparsable noise yields
an empty or partial record.
"""

from __future__ import annotations

from enum import Enum, auto

from linuxaudit.contracts.records import Record
from linuxaudit.core.logging import get_logger
from linuxaudit.parser.keys import set_field
from linuxaudit.parser.timestamp import AUDIT_PREFIX, extract_timestamp_id

logger = get_logger(__name__)

# Sub-messages at or beyond this depth are stored as plain text.
MAX_SUBMESSAGE_DEPTH = 1

MSG_KEY = "msg"


class ScanState(Enum):
    """States of the line scanner."""

    DEFAULT = auto()
    IN_DOUBLE_QUOTE = auto()
    IN_SINGLE_QUOTE = auto()


def tokenize(line: str, depth: int = 0) -> Record:
    """Parse one audit line into a record.

    Args:
        line: A logical audit line (may contain embedded newlines)
        depth: Current sub-message nesting depth

    Returns:
        Record of the line's fields, possibly empty
    """
    record: Record = {}
    buffer: list[str] = []
    key = ""
    state = ScanState.DEFAULT

    for idx, char in enumerate(line):
        if state is ScanState.IN_SINGLE_QUOTE:
            if char == "'":
                state = ScanState.DEFAULT
                buffer = [char]
                key = ""
            continue

        # DEFAULT and IN_DOUBLE_QUOTE share every transition except on '"'
        if char == '"':
            state = ScanState.DEFAULT if state is ScanState.IN_DOUBLE_QUOTE else ScanState.IN_DOUBLE_QUOTE
        elif char == "'":
            _complete_submessage(key, "".join(buffer), line[idx + 1 :], record, depth)
            buffer, key = [], ""
            state = ScanState.IN_SINGLE_QUOTE
        elif char == "=":
            key = "".join(buffer)
            buffer = []
        elif char.isspace():
            _complete_field(key, "".join(buffer), record)
            buffer, key = [], ""
        else:
            buffer.append(char)

    value = "".join(buffer)
    if key and value:
        set_field(key, value.removesuffix(":"), record)
    return record


def _complete_field(key: str, value: str, record: Record) -> None:
    """Store a key/value pair closed by whitespace."""
    if not key:
        return

    value = value.removesuffix(":")
    if key == MSG_KEY and value.startswith(AUDIT_PREFIX):
        if extract_timestamp_id(value, record):
            return
    set_field(key, value.removesuffix(":"), record)


def _complete_submessage(key: str, value: str, remainder: str, record: Record, depth: int) -> None:
    """Handle a single quote seen while a key is pending.

    Args:
        key: Pending key
        value: Text accumulated for the key before the quote
        remainder: Rest of the line after the quote
        record: Record to write into
        depth: Nesting depth of the line being scanned
    """
    if not key:
        return

    # The quote did not open the value: keep what was accumulated
    if value:
        set_field(key, value.removesuffix(":"), record)
        return

    end = remainder.find("'")
    if end == -1:
        return

    if depth >= MAX_SUBMESSAGE_DEPTH:
        logger.warning("submessage_depth_exceeded", key=key, max_depth=MAX_SUBMESSAGE_DEPTH)
        set_field(key, remainder[:end], record)
        return
    # The closing quote is kept so the nested scan flushes its last field
    set_field(key, tokenize(remainder[: end + 1], depth + 1), record)
