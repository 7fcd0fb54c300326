# src/linuxaudit/core/config.py
"""
Configuration schema and loading for linuxaudit parsers.

Uses Pydantic for validation and Dynaconf for multi-source loading.
Settings are frozen (immutable) after construction.
"""

import os
from pathlib import Path
from typing import Any, Self

from pydantic import BaseModel, Field, ValidationError

from linuxaudit.contracts.errors import ParserConfigError

# Environment variable prefix for overrides (LINUXAUDIT_KEEP_RAW_DATA=true)
ENV_PREFIX = "LINUXAUDIT"


def default_parallelism() -> int:
    """Available hardware parallelism, floor 1."""
    return max(os.cpu_count() or 1, 1)


class ParserSettings(BaseModel):
    """Settings consumed by the Linux audit parser.

    The parser owns none of these: hosts load them (from YAML, env or CLI
    flags) and pass the validated model in.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    name: str = Field(
        default="",
        description="Instance name reported by the parser",
    )
    disable_record_err_data: bool = Field(
        default=False,
        description="Drop the raw text of erroring lines instead of stashing it",
    )
    keep_raw_data: bool = Field(
        default=False,
        description="Attach the original line to every output row",
    )
    parallelism: int | None = Field(
        default=None,
        ge=1,
        description="Worker count (default: available hardware parallelism)",
    )

    @property
    def effective_parallelism(self) -> int:
        """Configured worker count, falling back to the CPU count."""
        if self.parallelism is None:
            return default_parallelism()
        return self.parallelism

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> Self:
        """Create settings from a dict with a clear error on validation failure.

        Raises:
            ParserConfigError: If configuration is invalid.
        """
        if not isinstance(config, dict):
            raise ParserConfigError(f"Invalid configuration for {cls.__name__}: config must be a dict, got {type(config).__name__}.")
        try:
            return cls.model_validate(config)
        except ValidationError as e:
            raise ParserConfigError(f"Invalid configuration for {cls.__name__}: {e}") from e


def load_settings(config_path: Path) -> ParserSettings:
    """Load parser settings from YAML with environment variable overrides.

    Uses Dynaconf for multi-source loading with precedence:
    1. Environment variables (LINUXAUDIT_*) - highest priority
    2. Config file
    3. Defaults from the Pydantic schema - lowest priority

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated ParserSettings instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ParserConfigError: If configuration fails validation
    """
    from dynaconf import Dynaconf

    # Dynaconf silently accepts missing files
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    dynaconf_settings = Dynaconf(
        envvar_prefix=ENV_PREFIX,
        settings_files=[str(config_path)],
        environments=False,
        load_dotenv=False,
        merge_enabled=True,
    )

    # Dynaconf returns uppercase keys; Pydantic fields are lowercase
    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"}
    raw_config = {k.lower(): v for k, v in dynaconf_settings.as_dict().items() if k not in internal_keys}

    return ParserSettings.from_dict(raw_config)
