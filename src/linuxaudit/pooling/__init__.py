# src/linuxaudit/pooling/__init__.py
"""Shared pooling infrastructure for parallel line parsing."""

from linuxaudit.pooling.config import PoolConfig
from linuxaudit.pooling.dispatcher import LineDispatcher, ParseFn

__all__ = [
    "LineDispatcher",
    "ParseFn",
    "PoolConfig",
]
