# tests/conftest.py
"""Shared test fixtures and helpers.

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/property/
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from linuxaudit.core.config import ParserSettings
from linuxaudit.parser.linux_audit import LinuxAuditParser
from linuxaudit.plugins.manager import ParserRegistry

settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,  # Thread pools make timing vary
)

settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))


# Lines from a RHEL audit.log used across parser tests.
SYSCALL_LINE = (
    "type=SYSCALL msg=audit(1364481363.243:24287): arch=c000003e syscall=2 success=no "
    "exit=-13 a0=7fffd19c5592 a1=0    a2=7fffd19c4b50"
)
CWD_LINE = """type=CWD msg='op=PAM:secret test1="a" res=success'
					cwd="/home/shadowman" """
PATH_LINE = (
    'type=PATH msg=audit(1364481363.243:24287): item=0 name="/etc/ssh/sshd_config" '
    "inode=409248 dev=fd:00 dev=system_u:object_r:etc_t:s0"
)


@pytest.fixture
def audit_lines() -> list[str]:
    return [SYSCALL_LINE, CWD_LINE, PATH_LINE]


@pytest.fixture
def parser() -> LinuxAuditParser:
    """Parser with default policy and a small pool."""
    return LinuxAuditParser(ParserSettings(parallelism=4))


@pytest.fixture
def registry() -> ParserRegistry:
    """Registry with the built-in parsers registered."""
    registry = ParserRegistry()
    registry.register_builtin_parsers()
    return registry
