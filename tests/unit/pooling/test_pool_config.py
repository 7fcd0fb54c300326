# tests/unit/pooling/test_pool_config.py
"""Tests for PoolConfig."""

import pytest
from pydantic import ValidationError

from linuxaudit.pooling import PoolConfig


class TestPoolConfig:
    def test_default_pool_size(self) -> None:
        assert PoolConfig().pool_size == 1

    def test_rejects_zero_pool_size(self) -> None:
        with pytest.raises(ValidationError):
            PoolConfig(pool_size=0)

    def test_rejects_unknown_fields(self) -> None:
        with pytest.raises(ValidationError):
            PoolConfig(pool_size=2, max_capacity_retry_seconds=10)

    def test_frozen(self) -> None:
        config = PoolConfig(pool_size=2)
        with pytest.raises(ValidationError):
            config.pool_size = 3  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("pool_size", "line_count", "expected"),
        [(4, 10, 4), (4, 2, 2), (4, 0, 1), (1, 100, 1)],
    )
    def test_workers_for(self, pool_size: int, line_count: int, expected: int) -> None:
        assert PoolConfig(pool_size=pool_size).workers_for(line_count) == expected
