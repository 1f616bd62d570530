"""In-memory manifest adapters for testing."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from ...domain.enums import PackageManager
from ...domain.errors import ManifestError
from ...domain.models import Manifest


@dataclass
class InMemoryManifests:
    """Serves ``package.json`` contents keyed by path.

    A lookup for a directory also finds the manifest stored for
    ``<directory>/package.json``.

    Example:
        >>> store = InMemoryManifests({Path("app/package.json"): {"react": "18.2.0"}})
        >>> store.read(Path("app")).all_dependencies
        {'react': '18.2.0'}
    """

    manifests: Mapping[Path, Mapping[str, str]] = field(default_factory=dict)
    package_manager: PackageManager = PackageManager.NPM

    def read(self, path: Path) -> Manifest:
        for candidate in (path, path / "package.json"):
            if candidate in self.manifests:
                return Manifest(path=candidate, name="", all_dependencies=dict(self.manifests[candidate]))
        raise ManifestError(f"No package.json found at {path}")

    def detect(self, project_dir: Path) -> PackageManager:
        return self.package_manager


__all__ = ["InMemoryManifests"]
