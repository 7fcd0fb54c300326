# src/linuxaudit/core/timeparse.py
"""Calendar-time collaborator for audit timestamps.

Audit records carry epoch timestamps such as ``1364481363.243``. The
extractor removes the dot and hands the digits here. Numeric strings
are scaled to microsecond precision by digit count rather than by
value, so ``1364481363243`` (milliseconds) and ``1364481363`` (seconds)
both land on the same instant.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

# Digit count of an epoch timestamp expressed in microseconds.
_MICROSECOND_DIGITS = 16

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def parse_timestamp(text: str) -> datetime:
    """Parse a numeric epoch timestamp or an ISO 8601 string.

    All-digit input is right-padded with zeros (or truncated) to 16 digits
    and read as microseconds since the Unix epoch. Other input is tried
    as ISO 8601; naive values are taken as UTC.

    Args:
        text: Timestamp text (surrounding whitespace ignored)

    Returns:
        Timezone-aware datetime

    Raises:
        ValueError: If text is empty or not a recognizable timestamp
    """
    value = text.strip()
    if not value:
        raise ValueError("empty timestamp")

    if value.isascii() and value.isdigit():
        digits = value[:_MICROSECOND_DIGITS].ljust(_MICROSECOND_DIGITS, "0")
        try:
            return _EPOCH + timedelta(microseconds=int(digits))
        except OverflowError as e:
            raise ValueError(f"timestamp out of range: {value}") from e

    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as e:
        raise ValueError(f"unrecognized timestamp: {value}") from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def format_timestamp(dt: datetime) -> str:
    """Format a datetime as RFC 3339 with trimmed fractional seconds.

    UTC renders as ``Z``. Trailing zeros of the fraction are dropped and
    a zero fraction is omitted: ``2013-03-28T14:36:03.243Z``,
    ``2005-03-18T01:40:00Z``.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)

    text = dt.strftime("%Y-%m-%dT%H:%M:%S")
    if dt.microsecond:
        text += "." + f"{dt.microsecond:06d}".rstrip("0")

    offset = dt.utcoffset()
    if not offset:
        return text + "Z"
    total_minutes = int(offset.total_seconds()) // 60
    sign = "+" if total_minutes >= 0 else "-"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{text}{sign}{hours:02d}:{minutes:02d}"
