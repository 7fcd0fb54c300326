# src/linuxaudit/parser/keys.py
"""Storage-key resolution for repeated field names.

Audit lines repeat field names (two ``dev=`` fields on a PATH record).
The first occurrence keeps the bare key; later ones get numbered
alternates.

Compatibility contract (kept exactly):
    The tried candidate lags the attempt counter by one, so ``key_1`` is
    tried twice and only ``key_1`` .. ``key_4`` are ever written. When
    every attempt hits an occupied slot the bare ``key`` is overwritten,
    i.e. the SIXTH occurrence of a field replaces the first one.
"""

from __future__ import annotations

from linuxaudit.contracts.records import Record

# Number of attempts at a free numbered alternate before overwriting.
MAX_KEY_ATTEMPTS = 5


def set_field(key: str, value: str | Record, record: Record) -> None:
    """Store value under key, or under the first free numbered alternate.

    Args:
        key: Field name (empty keys are ignored)
        value: String value or nested record
        record: Record to write into
    """
    if not key:
        return
    if key not in record:
        record[key] = value
        return

    candidate = f"{key}_1"
    for attempt in range(1, MAX_KEY_ATTEMPTS + 1):
        if candidate not in record:
            record[candidate] = value
            return
        candidate = f"{key}_{attempt}"
    record[key] = value
