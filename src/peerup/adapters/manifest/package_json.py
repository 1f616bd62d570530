"""``package.json`` reader."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, cast

import orjson

from ...domain.errors import ManifestError
from ...domain.models import Manifest

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "package.json"


def _dependency_section(data: Mapping[str, Any], key: str, path: Path) -> dict[str, str]:
    section: Any = data.get(key) or {}
    if not isinstance(section, Mapping):
        raise ManifestError(f"{path}: {key} is not an object")
    return {str(name): str(entry) for name, entry in cast(Mapping[str, Any], section).items()}


def read_manifest(path: Path) -> Manifest:
    """Read a project manifest.

    ``path`` may point at ``package.json`` itself or at the directory holding
    it. Dev dependencies override runtime dependencies of the same name.

    Raises:
        ManifestError: If the file is missing, unreadable or not a JSON object.
    """
    manifest_path = path / MANIFEST_FILENAME if path.is_dir() else path
    try:
        data = orjson.loads(manifest_path.read_bytes())
    except FileNotFoundError as exc:
        raise ManifestError(f"No package.json found at {manifest_path}") from exc
    except OSError as exc:
        raise ManifestError(f"Cannot read {manifest_path}: {exc}") from exc
    except orjson.JSONDecodeError as exc:
        raise ManifestError(f"{manifest_path} is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestError(f"{manifest_path} does not hold a JSON object")
    document = cast(dict[str, Any], data)

    dependencies = _dependency_section(document, "dependencies", manifest_path)
    dependencies.update(_dependency_section(document, "devDependencies", manifest_path))
    logger.debug("Read %d dependencies from %s", len(dependencies), manifest_path)
    return Manifest(path=manifest_path, name=str(document.get("name", "")), all_dependencies=dependencies)


__all__ = ["MANIFEST_FILENAME", "read_manifest"]
