# src/linuxaudit/parser/aggregator.py
"""Fold ordered line outcomes into output rows and batch statistics.

Policy per outcome, in input order:

- blank line: index goes to the skip list, no row.
- parse error: counted as an error. The raw line is stashed in a row
  unless error recording is disabled; with recording disabled and
  keep_raw_data off, the index is skipped instead.
- empty record: counted as an error ("parsed no data"), no row, and the
  index is NOT added to the skip list. This differs from blank lines and
  is kept for compatibility with downstream index correlation.
- non-empty record: counted as a success and emitted.
"""

from __future__ import annotations

from collections.abc import Sequence

from linuxaudit.contracts.errors import StatsError
from linuxaudit.contracts.records import KEY_PANDORA_STASH, KEY_RAW_DATA, LineOutcome, Record


def aggregate(
    outcomes: Sequence[LineOutcome],
    *,
    keep_raw_data: bool = False,
    disable_record_err_data: bool = False,
) -> tuple[list[Record], StatsError | None]:
    """Apply keep/skip policy to outcomes already in input order.

    Args:
        outcomes: One outcome per input line, ordered by index
        keep_raw_data: Attach the raw line to every emitted row
        disable_record_err_data: Do not stash the raw text of failed lines

    Returns:
        Tuple of (rows, stats). stats is None when no line errored.
    """
    rows: list[Record] = []
    stats = StatsError()

    for outcome in outcomes:
        if outcome.is_blank:
            stats.skip(outcome.index)
            continue

        if outcome.error is not None:
            stats.add_error(str(outcome.error))
            err_row: Record = {}
            if not disable_record_err_data:
                err_row[KEY_PANDORA_STASH] = outcome.line
            elif not keep_raw_data:
                stats.skip(outcome.index)
            if keep_raw_data:
                err_row[KEY_RAW_DATA] = outcome.line
            if not disable_record_err_data or keep_raw_data:
                rows.append(err_row)
            continue

        record = outcome.record
        if not record:
            stats.add_error(f"parsed no data by line {outcome.line}")
            continue

        stats.add_success()
        if keep_raw_data:
            record[KEY_RAW_DATA] = outcome.line
        rows.append(record)

    if stats.errors == 0:
        return rows, None
    return rows, stats
