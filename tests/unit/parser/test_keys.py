# tests/unit/parser/test_keys.py
"""Tests for repeated field name resolution."""

import pytest

from linuxaudit.contracts import Record
from linuxaudit.parser.keys import MAX_KEY_ATTEMPTS, set_field
from linuxaudit.parser.tokenizer import tokenize


def _store_n(n: int) -> Record:
    record: Record = {}
    for i in range(1, n + 1):
        set_field("dev", f"v{i}", record)
    return record


class TestSetField:
    """Direct key writes."""

    def test_absent_key_written_directly(self) -> None:
        record: Record = {}
        set_field("a", "b", record)
        assert record == {"a": "b"}

    def test_empty_key_ignored(self) -> None:
        record: Record = {}
        set_field("", "b", record)
        assert record == {}

    def test_audit_value_stored_verbatim(self) -> None:
        record: Record = {}
        set_field("msg", "audit(111111:222)", record)
        assert record == {"msg": "audit(111111:222)"}

    def test_nested_record_value(self) -> None:
        record: Record = {}
        set_field("msg", {"op": "a"}, record)
        assert record == {"msg": {"op": "a"}}


class TestCollisions:
    """Numbered alternates for repeated keys."""

    def test_second_occurrence_goes_to_key_1(self) -> None:
        assert _store_n(2) == {"dev": "v1", "dev_1": "v2"}

    @pytest.mark.parametrize(
        ("occurrences", "expected_alternate"),
        [(2, "dev_1"), (3, "dev_2"), (4, "dev_3"), (5, "dev_4")],
    )
    def test_occurrences_fill_alternates_in_order(self, occurrences: int, expected_alternate: str) -> None:
        record = _store_n(occurrences)
        assert record[expected_alternate] == f"v{occurrences}"
        assert record["dev"] == "v1"

    def test_alternates_dont_disturb_other_keys(self) -> None:
        record: Record = {"dev_1": "unrelated"}
        set_field("dev", "a", record)
        set_field("dev", "b", record)
        assert record == {"dev_1": "unrelated", "dev": "a", "dev_2": "b"}

    def test_tokenizer_uses_alternates(self) -> None:
        assert tokenize("dev=a dev=b dev=c") == {"dev": "a", "dev_1": "b", "dev_2": "c"}


class TestCollisionBound:
    """Documented-but-questionable edge case, kept for compatibility.

    Only four numbered alternates are ever used and the SIXTH occurrence
    overwrites the bare key, losing the first value. This looks
    unintended but downstream consumers depend on the exact key layout.
    """

    def test_attempt_count(self) -> None:
        assert MAX_KEY_ATTEMPTS == 5

    def test_sixth_occurrence_overwrites_original_key(self) -> None:
        record = _store_n(6)
        assert record == {"dev": "v6", "dev_1": "v2", "dev_2": "v3", "dev_3": "v4", "dev_4": "v5"}

    def test_key_5_is_never_written(self) -> None:
        assert "dev_5" not in _store_n(10)

    def test_later_occurrences_keep_overwriting_original_key(self) -> None:
        record = _store_n(8)
        assert record["dev"] == "v8"
        assert len(record) == 5
