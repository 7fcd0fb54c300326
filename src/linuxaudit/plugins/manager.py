# src/linuxaudit/plugins/manager.py
"""Parser registry for discovery, registration, and lookup.

Uses pluggy for hook-based registration. The registry is an explicit
object owned by the host, not a module-level global that parsers
mutate when imported.
"""

from typing import Any

import pluggy

from linuxaudit.contracts.errors import UnknownParserError
from linuxaudit.core.logging import get_logger
from linuxaudit.plugins.hookspecs import PROJECT_NAME, LinuxAuditParserSpec, hookimpl
from linuxaudit.plugins.protocols import ParserProtocol

logger = get_logger(__name__)


class BuiltinParsers:
    """Hook implementation exposing the parsers shipped with linuxaudit."""

    @hookimpl
    def linuxaudit_get_parsers(self) -> list[type[ParserProtocol]]:
        from linuxaudit.parser.linux_audit import LinuxAuditParser

        return [LinuxAuditParser]


class ParserRegistry:
    """Manages parser registration and lookup by type name.

    Usage:
        registry = ParserRegistry()
        registry.register_builtin_parsers()

        parser = registry.create("linuxaudit", {"keep_raw_data": True})
    """

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(LinuxAuditParserSpec)

        # Cache - map type name to parser class for duplicate detection
        self._parsers: dict[str, type[ParserProtocol]] = {}

    def register_builtin_parsers(self) -> None:
        """Register the built-in parsers.

        Call this once at startup to make built-in parsers discoverable.
        """
        self.register(BuiltinParsers())

    def register(self, plugin: Any) -> None:
        """Register a plugin.

        Args:
            plugin: Plugin instance implementing hook methods

        Raises:
            ValueError: If a parser type name is already registered
        """
        self._pm.register(plugin)
        try:
            self._refresh_cache()
        except ValueError:
            self._pm.unregister(plugin)
            raise

    def _refresh_cache(self) -> None:
        """Refresh the parser cache from hooks.

        Raises:
            ValueError: If two parser classes share a type name
        """
        new_parsers: dict[str, type[ParserProtocol]] = {}
        for parsers in self._pm.hook.linuxaudit_get_parsers():
            for cls in parsers:
                type_name = cls.type
                if type_name in new_parsers:
                    raise ValueError(f"Duplicate parser type: '{type_name}'. Already registered by {new_parsers[type_name].__name__}")
                new_parsers[type_name] = cls

        self._parsers = new_parsers
        logger.debug("parsers_registered", types=sorted(new_parsers))

    def get_parsers(self) -> list[type[ParserProtocol]]:
        """Get all registered parser classes."""
        return list(self._parsers.values())

    def get_parser_by_name(self, type_name: str) -> type[ParserProtocol] | None:
        """Get parser class by type name."""
        return self._parsers.get(type_name)

    def create(self, type_name: str, config: dict[str, Any]) -> ParserProtocol:
        """Instantiate a registered parser from a configuration mapping.

        Raises:
            UnknownParserError: If no parser is registered under type_name
            ParserConfigError: If the parser rejects the configuration
        """
        parser_cls = self.get_parser_by_name(type_name)
        if parser_cls is None:
            raise UnknownParserError(type_name, list(self._parsers))
        return parser_cls.from_dict(config)
