# src/linuxaudit/plugins/protocols.py
"""Parser protocol defining the contract for parser plugins.

Used for type checking and for the registry's sanity check on
registered classes; pluggy does the actual wiring.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from linuxaudit.contracts import Record, StatsError


@runtime_checkable
class ParserProtocol(Protocol):
    """Protocol for parser plugins.

    Lifecycle:
    1. from_dict(config) - Validated instantiation by the registry
    2. parse(lines) - Any number of batches
    """

    type: str

    @property
    def name(self) -> str: ...

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> "ParserProtocol": ...

    def parse(self, lines: Sequence[str]) -> tuple[list["Record"], "StatsError | None"]: ...
