"""Public package surface of peerup.

Routes imports through the architectural layers:
- Domain exports: version helpers and the upgrade candidate model
- Application exports: the resolution engine and the upgrade use case
- Composition exports: wired configuration loading
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.engine import UpgradeEngine, UpgradeRequest
from .application.peers import PeerResolver
from .application.upgrade import plan_upgrade

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.models import UpgradeCandidate
from .domain.versions import (
    compare_versions,
    highlight_diff,
    split_version_and_mode,
    strip_range_prefix,
    transform_peer_version,
)

__all__ = [
    "PeerResolver",
    "UpgradeCandidate",
    "UpgradeEngine",
    "UpgradeRequest",
    "compare_versions",
    "get_config",
    "highlight_diff",
    "plan_upgrade",
    "print_info",
    "split_version_and_mode",
    "strip_range_prefix",
    "transform_peer_version",
]
