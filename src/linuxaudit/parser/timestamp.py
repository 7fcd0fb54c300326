# src/linuxaudit/parser/timestamp.py
"""Extraction of the ``audit(<timestamp>:<id>)`` token.

The kernel prefixes every record with ``msg=audit(1364481363.243:24287):``.
Instead of keeping that as an opaque ``msg`` value, the extractor writes
two derived fields: ``msg_timestamp`` (normalized through the time
collaborator) and ``msg_id`` (the event serial).
"""

from __future__ import annotations

from linuxaudit.contracts.records import Record
from linuxaudit.core.logging import get_logger
from linuxaudit.core.timeparse import format_timestamp, parse_timestamp

logger = get_logger(__name__)

AUDIT_PREFIX = "audit("
TIMESTAMP_FIELD = "msg_timestamp"
ID_FIELD = "msg_id"


def extract_timestamp_id(value: str, record: Record) -> bool:
    """Write msg_timestamp and msg_id derived from an ``audit(...)`` value.

    A timestamp that the time collaborator rejects is kept verbatim
    (trimmed) rather than failing the line.

    Args:
        value: Text starting with ``audit(``
        record: Record receiving the derived fields

    Returns:
        True if the fields were written, False if the value has no
        ``timestamp:id`` separator (caller keeps the raw value)
    """
    inner = value.removeprefix(AUDIT_PREFIX).removesuffix(")")
    raw_timestamp, sep, raw_id = inner.partition(":")
    if not sep:
        return False

    # Seconds and sub-second counter are joined: 1364481363.243 -> 1364481363243
    timestamp = raw_timestamp.replace(".", "", 1) if "." in raw_timestamp else raw_timestamp.strip()
    try:
        record[TIMESTAMP_FIELD] = format_timestamp(parse_timestamp(timestamp))
    except ValueError as e:
        logger.warning("msg_timestamp_parse_failed", timestamp=timestamp, error=str(e))
        record[TIMESTAMP_FIELD] = raw_timestamp.strip()

    record[ID_FIELD] = raw_id.strip()
    return True
