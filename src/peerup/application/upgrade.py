"""Upgrade use case: from a project manifest to the list of packages to upgrade.

Contents:
    * :func:`find_components` - installed components of a manifest.
    * :func:`select_components` - narrow components to the requested names.
    * :func:`plan_upgrade` - query the registry and run the upgrade engine.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..domain.errors import UnknownComponentError
from ..domain.models import Manifest, UpgradeCandidate, UpgradeScope
from ..domain.versions import split_version_and_mode
from .engine import UpgradeEngine, UpgradeRequest, gather_in_order
from .peers import PeerResolver
from .ports import OutputBox, Registry

logger = logging.getLogger(__name__)


def find_components(manifest: Manifest, scope: UpgradeScope) -> list[str]:
    """Return the installed component packages in manifest order.

    Example:
        >>> from pathlib import Path
        >>> manifest = Manifest(Path("package.json"), "app", {
        ...     "@nextui-org/button": "2.0.0", "@nextui-org/theme": "2.1.0", "react": "18.2.0"})
        >>> find_components(manifest, UpgradeScope("@nextui-org/react", "@nextui-org/theme", "@nextui-org/"))
        ['@nextui-org/button']
    """
    return [name for name in manifest.all_dependencies if scope.is_component(name)]


def select_components(
    installed: Sequence[str],
    requested: Sequence[str],
    *,
    scope: UpgradeScope,
    select_all: bool = False,
) -> list[str]:
    """Narrow ``installed`` to the ``requested`` component names.

    Short names are expanded with the component prefix. Without names, or
    with ``select_all``, every installed component is selected.

    Raises:
        UnknownComponentError: If a requested component is not installed.

    Example:
        >>> scope = UpgradeScope("@nextui-org/react", "@nextui-org/theme", "@nextui-org/")
        >>> installed = ["@nextui-org/button", "@nextui-org/card"]
        >>> select_components(installed, ["card"], scope=scope)
        ['@nextui-org/card']
        >>> select_components(installed, ["nope"], scope=scope)
        Traceback (most recent call last):
        ...
        peerup.domain.errors.UnknownComponentError: Unknown components: @nextui-org/nope
    """
    if select_all or not requested:
        return list(installed)

    expanded = [scope.expand(name) for name in requested]
    unknown = [name for name in expanded if name not in installed]
    if unknown:
        raise UnknownComponentError(unknown)
    return [name for name in installed if name in expanded]


async def plan_upgrade(
    manifest: Manifest,
    scope: UpgradeScope,
    registry: Registry,
    output_box: OutputBox,
    *,
    components: Sequence[str] = (),
    select_all: bool = False,
    ignore: Sequence[str] = (),
) -> list[UpgradeCandidate] | None:
    """Resolve which packages of ``manifest`` need an upgrade.

    The umbrella package takes precedence: when it is installed only it and
    its peers are considered. Otherwise the selected components are compared
    against their latest published versions.

    Args:
        manifest: Project manifest to inspect.
        scope: Umbrella, theme and component naming of the run.
        registry: Registry session answering latest-version and peer queries.
        output_box: Receives the rendered report sections.
        components: Component names to restrict the run to.
        select_all: Consider every installed component.
        ignore: Packages left out of the returned list.

    Returns:
        Candidates that need an upgrade, or ``None`` when the manifest holds
        neither the umbrella package nor any component.

    Raises:
        RegistryError: If a latest-version lookup fails.
        UnknownComponentError: If a requested component is not installed.
        MalformedVersionError: If a version cannot be interpreted.
    """
    deps = manifest.all_dependencies
    installed_components = find_components(manifest, scope)
    is_umbrella = scope.umbrella_package in deps

    if not is_umbrella and not installed_components:
        logger.info("No components found in %s", manifest.path)
        return None

    engine = UpgradeEngine(PeerResolver(registry.query_peer_dependencies), output_box)

    if is_umbrella:
        latest = await registry.get_latest_version(scope.umbrella_package)
        request = UpgradeRequest.umbrella(
            deps,
            latest,
            umbrella_package=scope.umbrella_package,
            theme_package=scope.theme_package,
        )
    else:
        selected = select_components(installed_components, components, scope=scope, select_all=select_all)
        latest_versions = await gather_in_order(registry.get_latest_version(name) for name in selected)
        candidates = [
            UpgradeCandidate.create(
                name,
                deps[name],
                latest,
                version_mode=split_version_and_mode(deps[name]).mode,
            )
            for name, latest in zip(selected, latest_versions)
        ]
        request = UpgradeRequest.components(deps, candidates)

    result = await engine.resolve(request)
    ignored = set(ignore)
    return [candidate for candidate in result if candidate.package not in ignored]


__all__ = ["find_components", "plan_upgrade", "select_components"]
