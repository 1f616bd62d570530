"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function.  Existing module-level functions
satisfy these protocols automatically via structural subtyping (PEP 544).

The registry is the one stateful collaborator: it holds an HTTP client and
a per-run cache, so it is modelled as an object protocol (:class:`Registry`)
opened through the :class:`OpenRegistry` factory port.

System Role:
    Sits between domain and adapters.  Infrastructure types (``Config``,
    ``RegistrySettings``) are imported under ``TYPE_CHECKING`` only so that
    import-linter layer contracts remain satisfied at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import OutputFormat, PackageManager
from ..domain.models import Manifest, PeerDependencies

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.settings import PeerupSettings, RegistrySettings


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class LoadSettingsFromDict(Protocol):
    """Parse the ``[upgrade]`` and ``[registry]`` sections into typed settings."""

    def __call__(self, config_dict: Mapping[str, Any]) -> PeerupSettings: ...


class PeerDependencyLookup(Protocol):
    """Return the declared peer dependencies of a package's latest release.

    Raises ``PeerLookupError`` when the registry cannot answer.
    """

    async def __call__(self, package_name: str) -> PeerDependencies: ...


class LatestVersionLookup(Protocol):
    """Return the latest published version of a package.

    Raises ``RegistryError`` when the registry cannot answer.
    """

    async def __call__(self, package_name: str) -> str: ...


class Registry(Protocol):
    """Package registry session used by one upgrade run."""

    async def get_latest_version(self, package_name: str) -> str: ...

    async def query_peer_dependencies(self, package_name: str) -> PeerDependencies: ...

    async def aclose(self) -> None: ...


class OpenRegistry(Protocol):
    """Open a registry session for the given settings."""

    def __call__(self, settings: RegistrySettings) -> Registry: ...


class OutputBox(Protocol):
    """Present one titled report section to the user."""

    def __call__(self, *, title: str, color: str, text: str) -> None: ...


class ReadManifest(Protocol):
    """Read a project's ``package.json``."""

    def __call__(self, path: Path) -> Manifest: ...


class DetectPackageManager(Protocol):
    """Pick the package manager a project uses from its lockfiles."""

    def __call__(self, project_dir: Path) -> PackageManager: ...


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
    "ReadManifest",
    "Registry",
]
