# src/linuxaudit/plugins/__init__.py
"""Parser plugin system via pluggy.

- Protocols: Type contract for parser implementations
- Hookspecs: pluggy hook definitions
- Manager: Explicit parser registry populated by the host
"""

from linuxaudit.plugins.hookspecs import hookimpl
from linuxaudit.plugins.manager import BuiltinParsers, ParserRegistry
from linuxaudit.plugins.protocols import ParserProtocol

__all__ = [
    "BuiltinParsers",
    "ParserProtocol",
    "ParserRegistry",
    "hookimpl",
]
