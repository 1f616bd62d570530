"""Package manager detection and the suggested install command."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from ...domain.enums import PackageManager
from ...domain.models import UpgradeCandidate

#: Lockfiles in detection priority order.
LOCKFILES: tuple[tuple[str, PackageManager], ...] = (
    ("pnpm-lock.yaml", PackageManager.PNPM),
    ("yarn.lock", PackageManager.YARN),
    ("bun.lockb", PackageManager.BUN),
    ("bun.lock", PackageManager.BUN),
    ("package-lock.json", PackageManager.NPM),
)


def detect_package_manager(project_dir: Path) -> PackageManager:
    """Pick the package manager from the lockfile in ``project_dir``.

    Falls back to npm when no known lockfile exists.
    """
    for filename, manager in LOCKFILES:
        if (project_dir / filename).is_file():
            return manager
    return PackageManager.NPM


def install_command(manager: PackageManager, candidates: Sequence[UpgradeCandidate]) -> str:
    """Command line that installs every candidate at its target version.

    Example:
        >>> candidate = UpgradeCandidate("@nextui-org/react", "2.0.0", "2.4.6", False)
        >>> install_command(PackageManager.PNPM, [candidate])
        'pnpm add @nextui-org/react@2.4.6'
        >>> install_command(PackageManager.NPM, [])
        ''
    """
    if not candidates:
        return ""
    targets = " ".join(f"{candidate.package}@{candidate.latest_version}" for candidate in candidates)
    return f"{manager.value} {manager.add_verb} {targets}"


__all__ = ["LOCKFILES", "detect_package_manager", "install_command"]
