# src/linuxaudit/parser/lines.py
"""Assembly of physical lines into logical audit lines."""

from __future__ import annotations

from collections.abc import Iterable


def join_continuation_lines(physical_lines: Iterable[str]) -> list[str]:
    """Join indented continuation lines onto the preceding line.

    A quoted sub-message sometimes continues visually on the next,
    indented line. The tokenizer scans one string per record, so such
    entries are glued back together with a newline. A continuation with
    no preceding line starts a line of its own.

    Args:
        physical_lines: Lines as read from a file (trailing newlines allowed)

    Returns:
        Logical lines in input order
    """
    logical: list[str] = []
    for raw in physical_lines:
        line = raw.rstrip("\r\n")
        if logical and line[:1].isspace() and line.strip():
            logical[-1] = f"{logical[-1]}\n{line}"
        else:
            logical.append(line)
    return logical
