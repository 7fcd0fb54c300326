"""
linuxaudit: Parallel transcription of Linux audit log lines into records.

Turns raw ``key=value`` audit lines, including quoted sub-messages and the
``audit(timestamp:id)`` token, into structured records over a batch of lines,
preserving input order and summarizing per-line failures.
"""

__version__ = "0.1.0"
