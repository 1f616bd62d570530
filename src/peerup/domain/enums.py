"""Type-safe domain enums for output formats and package managers."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for the config and upgrade commands.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable output (TOML-like config, boxed upgrade report).
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class PackageManager(str, Enum):
    """Package managers whose install command can be suggested.

    The value doubles as the executable name.

    Example:
        >>> PackageManager.PNPM.value
        'pnpm'
        >>> PackageManager("bun") is PackageManager.BUN
        True
    """

    NPM = "npm"
    PNPM = "pnpm"
    YARN = "yarn"
    BUN = "bun"

    @property
    def add_verb(self) -> str:
        """Sub-command that adds or upgrades dependencies."""
        return "install" if self is PackageManager.NPM else "add"


__all__ = [
    "OutputFormat",
    "PackageManager",
]
