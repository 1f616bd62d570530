"""Value objects of an upgrade run: the manifest, its scope and candidates."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Union

from .versions import compare_versions, highlight_diff, normalize_installed_version, strip_range_prefix

#: Declared peers of a package: a mapping, or name/range pairs that may repeat a name.
PeerDependencies = Union[Mapping[str, str], Sequence[tuple[str, str]]]


@dataclass(frozen=True, slots=True)
class UpgradeCandidate:
    """One package's upgrade decision.

    ``latest_version`` is the bare comparison value; ``display_latest`` is the
    same version as shown in reports and may carry Rich highlight markup.

    Attributes:
        package: Package name, unique within a resolved list.
        version: Installed version.
        latest_version: Target version used for comparison and installation.
        is_latest: True when ``version`` is at or above ``latest_version``.
        version_mode: Range prefix from the manifest (``^``, ``~`` or empty).
        display_latest: Target version as rendered; defaults to ``latest_version``.
        peer_dependencies: Declared peers, only for caller-supplied candidates.

    Example:
        >>> candidate = UpgradeCandidate.create("foo", "^1.0.0", "1.2.0", version_mode="^")
        >>> candidate.version, candidate.is_latest
        ('1.0.0', False)
    """

    package: str
    version: str
    latest_version: str
    is_latest: bool
    version_mode: str = ""
    display_latest: str = ""
    peer_dependencies: PeerDependencies | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not self.display_latest:
            object.__setattr__(self, "display_latest", self.latest_version)

    @classmethod
    def create(
        cls,
        package: str,
        version: str,
        latest_version: str,
        *,
        version_mode: str = "",
        peer_dependencies: PeerDependencies | None = None,
    ) -> UpgradeCandidate:
        """Build a candidate, classifying ``is_latest`` from the two versions.

        Raises:
            MalformedVersionError: If either version is not a semantic version.
        """
        current = normalize_installed_version(version)
        target = strip_range_prefix(latest_version)
        return cls(
            package=package,
            version=current,
            latest_version=target,
            is_latest=compare_versions(current, target) >= 0,
            version_mode=version_mode,
            peer_dependencies=peer_dependencies,
        )

    def normalized(self) -> UpgradeCandidate:
        """Return a copy with a bare version and a highlighted display target."""
        return replace(
            self,
            version=strip_range_prefix(self.version),
            display_latest=highlight_diff(self.version, self.latest_version),
        )

    def to_dict(self) -> dict[str, object]:
        """Plain mapping for JSON output (display markup excluded)."""
        return {
            "package": self.package,
            "version": self.version,
            "latestVersion": self.latest_version,
            "isLatest": self.is_latest,
            "versionMode": self.version_mode,
        }


@dataclass(frozen=True, slots=True)
class Manifest:
    """Dependencies declared by a project's ``package.json``.

    Attributes:
        path: Location of the manifest file.
        name: The project's own package name (may be empty).
        all_dependencies: ``dependencies`` overlaid by ``devDependencies``,
            package name to declared version entry.
    """

    path: Path
    name: str
    all_dependencies: Mapping[str, str]

    @property
    def project_dir(self) -> Path:
        return self.path.parent


@dataclass(frozen=True, slots=True)
class UpgradeScope:
    """Which packages an upgrade run looks at.

    Example:
        >>> scope = UpgradeScope("@nextui-org/react", "@nextui-org/theme", "@nextui-org/")
        >>> scope.is_component("@nextui-org/button")
        True
        >>> scope.is_component("@nextui-org/theme")
        False
        >>> scope.expand("button")
        '@nextui-org/button'
    """

    umbrella_package: str
    theme_package: str
    component_prefix: str

    def is_component(self, package: str) -> bool:
        """True for prefixed packages other than the umbrella and theme packages."""
        return package.startswith(self.component_prefix) and package not in (
            self.umbrella_package,
            self.theme_package,
        )

    def expand(self, name: str) -> str:
        """Prefix a short component name; full names pass through."""
        if name.startswith(self.component_prefix):
            return name
        return f"{self.component_prefix}{name}"


__all__ = ["Manifest", "PeerDependencies", "UpgradeCandidate", "UpgradeScope"]
