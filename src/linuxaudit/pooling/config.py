# src/linuxaudit/pooling/config.py
"""Pool configuration for parallel line parsing."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PoolConfig(BaseModel):
    """Pool configuration for the line dispatcher.

    Attributes:
        pool_size: Maximum number of worker threads per batch (must be >= 1).
            A batch never starts more workers than it has lines.
    """

    model_config = {"extra": "forbid", "frozen": True}

    pool_size: int = Field(1, ge=1, description="Maximum number of worker threads")

    def workers_for(self, line_count: int) -> int:
        """Worker count for a batch of line_count lines (floor 1)."""
        return max(min(self.pool_size, line_count), 1)
