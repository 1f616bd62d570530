"""Project manifest adapters.

Contents:
    * :mod:`.package_json` - ``package.json`` reading
    * :mod:`.package_manager` - lockfile detection and install command
"""

from __future__ import annotations

from .package_json import MANIFEST_FILENAME, read_manifest
from .package_manager import detect_package_manager, install_command

__all__ = ["MANIFEST_FILENAME", "detect_package_manager", "install_command", "read_manifest"]
