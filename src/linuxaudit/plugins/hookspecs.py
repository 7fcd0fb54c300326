# src/linuxaudit/plugins/hookspecs.py
"""pluggy hook specifications for linuxaudit parsers.

Plugins implement these hooks to make parser classes discoverable by
type name. Nothing registers itself at import time: the host builds a
ParserRegistry and registers plugins explicitly at startup.

Usage (implementing a plugin):
    from linuxaudit.plugins.hookspecs import hookimpl

    class MyPlugin:
        @hookimpl  # NOT @hookspec - that's for defining specs
        def linuxaudit_get_parsers(self):
            return [MyParser]
"""

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from linuxaudit.plugins.protocols import ParserProtocol

# Project name for pluggy
PROJECT_NAME = "linuxaudit"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)

hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class LinuxAuditParserSpec:
    """Hook specifications for parser plugins."""

    @hookspec
    def linuxaudit_get_parsers(self) -> list[type["ParserProtocol"]]:  # type: ignore[empty-body]
        """Return parser plugin classes.

        Returns:
            List of parser classes (not instances)
        """
