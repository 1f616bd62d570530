"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
    * Upgrade command from :mod:`.upgrade_cmd`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .upgrade_cmd import cli_upgrade

__all__ = [
    "cli_config",
    "cli_info",
    "cli_upgrade",
]
