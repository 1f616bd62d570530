"""Tests for package.json reading, lockfile detection and the install command."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from peerup.adapters.manifest import detect_package_manager, install_command, read_manifest
from peerup.domain.enums import PackageManager
from peerup.domain.errors import ManifestError
from peerup.domain.models import UpgradeCandidate

# ---------------------------------------------------------------------------
# read_manifest
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_read_manifest_merges_dev_dependencies_over_dependencies(write_package_json: Callable[..., Path]) -> None:
    """Dev dependencies extend and override runtime dependencies."""
    path = write_package_json(
        dependencies={"react": "^18.2.0", "@nextui-org/button": "2.0.0"},
        dev_dependencies={"@nextui-org/button": "2.0.5", "typescript": "5.4.0"},
    )

    manifest = read_manifest(path)

    assert manifest.all_dependencies == {
        "react": "^18.2.0",
        "@nextui-org/button": "2.0.5",
        "typescript": "5.4.0",
    }
    assert manifest.name == "demo-app"
    assert manifest.path == path


@pytest.mark.os_agnostic
def test_read_manifest_accepts_the_project_directory(write_package_json: Callable[..., Path]) -> None:
    """A directory path resolves to its package.json."""
    path = write_package_json(dependencies={"react": "18.3.1"})

    manifest = read_manifest(path.parent)

    assert manifest.path == path
    assert manifest.project_dir == path.parent


@pytest.mark.os_agnostic
def test_read_manifest_without_dependency_sections_is_empty(write_package_json: Callable[..., Path]) -> None:
    """Projects without dependencies have none."""
    manifest = read_manifest(write_package_json())

    assert manifest.all_dependencies == {}


@pytest.mark.os_agnostic
def test_read_manifest_reports_missing_file(tmp_path: Path) -> None:
    """A missing package.json names the expected location."""
    with pytest.raises(ManifestError, match="No package.json found"):
        read_manifest(tmp_path)


@pytest.mark.os_agnostic
def test_read_manifest_rejects_invalid_json(tmp_path: Path) -> None:
    """Broken JSON is a manifest error, not a crash."""
    path = tmp_path / "package.json"
    path.write_text("{ not json", encoding="utf-8")

    with pytest.raises(ManifestError, match="not valid JSON"):
        read_manifest(path)


@pytest.mark.os_agnostic
def test_read_manifest_rejects_non_object_document(tmp_path: Path) -> None:
    """The top level must be an object."""
    path = tmp_path / "package.json"
    path.write_text("[]", encoding="utf-8")

    with pytest.raises(ManifestError, match="does not hold a JSON object"):
        read_manifest(path)


@pytest.mark.os_agnostic
def test_read_manifest_rejects_non_object_dependencies(tmp_path: Path) -> None:
    """Dependency sections must be objects."""
    path = tmp_path / "package.json"
    path.write_text('{"dependencies": ["react"]}', encoding="utf-8")

    with pytest.raises(ManifestError, match="dependencies is not an object"):
        read_manifest(path)


# ---------------------------------------------------------------------------
# detect_package_manager
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("lockfile", "expected"),
    [
        ("pnpm-lock.yaml", PackageManager.PNPM),
        ("yarn.lock", PackageManager.YARN),
        ("bun.lockb", PackageManager.BUN),
        ("bun.lock", PackageManager.BUN),
        ("package-lock.json", PackageManager.NPM),
    ],
)
def test_detect_package_manager_follows_lockfile(
    write_package_json: Callable[..., Path], lockfile: str, expected: PackageManager
) -> None:
    """Each lockfile selects its package manager."""
    path = write_package_json(lockfile=lockfile)

    assert detect_package_manager(path.parent) is expected


@pytest.mark.os_agnostic
def test_detect_package_manager_defaults_to_npm(tmp_path: Path) -> None:
    """Without a lockfile npm is assumed."""
    assert detect_package_manager(tmp_path) is PackageManager.NPM


@pytest.mark.os_agnostic
def test_detect_package_manager_prefers_pnpm_over_npm_lockfile(tmp_path: Path) -> None:
    """When several lockfiles exist the first in priority order wins."""
    (tmp_path / "package-lock.json").write_text("{}", encoding="utf-8")
    (tmp_path / "pnpm-lock.yaml").write_text("", encoding="utf-8")

    assert detect_package_manager(tmp_path) is PackageManager.PNPM


# ---------------------------------------------------------------------------
# install_command
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("manager", "prefix"),
    [
        (PackageManager.NPM, "npm install"),
        (PackageManager.PNPM, "pnpm add"),
        (PackageManager.YARN, "yarn add"),
        (PackageManager.BUN, "bun add"),
    ],
)
def test_install_command_lists_every_target(manager: PackageManager, prefix: str) -> None:
    """Each candidate is pinned to its target version."""
    candidates = [
        UpgradeCandidate("@nextui-org/react", "2.0.0", "2.4.6", False),
        UpgradeCandidate("framer-motion", "10.16.4", "11.5.6", False),
    ]

    assert install_command(manager, candidates) == f"{prefix} @nextui-org/react@2.4.6 framer-motion@11.5.6"


@pytest.mark.os_agnostic
def test_install_command_without_candidates_is_empty() -> None:
    """Nothing to install yields no command."""
    assert install_command(PackageManager.YARN, []) == ""
