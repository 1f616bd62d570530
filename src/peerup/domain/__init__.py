"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.enums` - Domain enumerations (OutputFormat, PackageManager)
    * :mod:`.errors` - Domain exception types
    * :mod:`.models` - Manifest, scope and upgrade candidate value objects
    * :mod:`.report` - Column-aligned report rendering
    * :mod:`.versions` - Semantic-version comparison and range collapsing
"""

from __future__ import annotations

from .enums import OutputFormat, PackageManager
from .errors import (
    ConfigurationError,
    MalformedVersionError,
    ManifestError,
    PeerLookupError,
    RegistryError,
    UnknownComponentError,
)
from .models import Manifest, PeerDependencies, UpgradeCandidate, UpgradeScope
from .report import REPORT_SECTIONS, UpgradeReport, render_report, render_section
from .versions import (
    compare_versions,
    highlight_diff,
    normalize_installed_version,
    split_version_and_mode,
    strip_range_prefix,
    transform_peer_version,
)

__all__ = [
    # Enums
    "OutputFormat",
    "PackageManager",
    # Errors
    "ConfigurationError",
    "MalformedVersionError",
    "ManifestError",
    "PeerLookupError",
    "RegistryError",
    "UnknownComponentError",
    # Models
    "Manifest",
    "PeerDependencies",
    "UpgradeCandidate",
    "UpgradeScope",
    # Report
    "REPORT_SECTIONS",
    "UpgradeReport",
    "render_report",
    "render_section",
    # Versions
    "compare_versions",
    "highlight_diff",
    "normalize_installed_version",
    "split_version_and_mode",
    "strip_range_prefix",
    "transform_peer_version",
]
