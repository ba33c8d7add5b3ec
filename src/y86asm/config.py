"""
y86asm Configuration
====================

Assembler options and where they come from:
- Default values (defined here)
- Environment variables (AssemblerConfig.from_env)
- Explicit keyword arguments to Assembler / command-line flags, which
  take precedence over both
"""

from dataclasses import dataclass
import os
from typing import Optional


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _env_flag(name: str) -> Optional[bool]:
    """Read a boolean environment variable; None if unset or invalid."""
    value = os.environ.get(name)
    if value is None:
        return None
    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return None


@dataclass
class AssemblerConfig:
    """
    Configuration for an assembly run.

    Attributes:
        strict: Fail on lines that are neither directive nor instruction
                instead of skipping them with a warning (default: False)
        check_overlaps: Fail when '.pos' makes two emissions share an
                        address (default: False)
        listing_suffix: Suffix of the default listing file (default: ".yo")
    """
    strict: bool = False
    check_overlaps: bool = False
    listing_suffix: str = ".yo"

    @classmethod
    def from_env(cls) -> "AssemblerConfig":
        """
        Create AssemblerConfig from environment variables.

        Environment variables (all optional):
            Y86ASM_STRICT: Strict mode (1/true/yes/on or 0/false/no/off)
            Y86ASM_CHECK_OVERLAPS: Overlap checking (same values)

        Invalid values are ignored.
        """
        config = cls()

        if (strict := _env_flag("Y86ASM_STRICT")) is not None:
            config.strict = strict

        if (overlaps := _env_flag("Y86ASM_CHECK_OVERLAPS")) is not None:
            config.check_overlaps = overlaps

        return config


_default_config: Optional[AssemblerConfig] = None


def get_default_config() -> AssemblerConfig:
    """Return the process-wide default configuration, read from the environment once."""
    global _default_config
    if _default_config is None:
        _default_config = AssemblerConfig.from_env()
    return _default_config


def set_default_config(config: Optional[AssemblerConfig]) -> None:
    """Replace the default configuration (None re-reads the environment)."""
    global _default_config
    _default_config = config
