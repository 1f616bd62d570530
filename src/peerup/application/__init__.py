"""Application layer - use cases and port definitions.

Contains use cases that orchestrate domain logic and port protocols that
define the interfaces for adapter implementations.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
    * :mod:`.peers` - Peer-dependency expansion of one package
    * :mod:`.engine` - Upgrade resolution and report hand-off
    * :mod:`.upgrade` - Manifest-to-upgrade-list use case
"""

from __future__ import annotations

from .engine import UpgradeEngine, UpgradeRequest, gather_in_order
from .peers import PeerResolver
from .ports import (
    DetectPackageManager,
    DisplayConfig,
    GetConfig,
    InitLogging,
    LatestVersionLookup,
    LoadSettingsFromDict,
    OpenRegistry,
    OutputBox,
    PeerDependencyLookup,
    ReadManifest,
    Registry,
)
from .upgrade import find_components, plan_upgrade, select_components

__all__ = [
    "DetectPackageManager",
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LatestVersionLookup",
    "LoadSettingsFromDict",
    "OpenRegistry",
    "OutputBox",
    "PeerDependencyLookup",
    "PeerResolver",
    "ReadManifest",
    "Registry",
    "UpgradeEngine",
    "UpgradeRequest",
    "find_components",
    "gather_in_order",
    "plan_upgrade",
    "select_components",
]
