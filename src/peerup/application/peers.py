"""Peer-dependency expansion of a single package.

Contents:
    * :class:`PeerResolver` - turn one package's declared peers into
      upgrade candidates checked against the project's installed versions.

The resolver only looks one level deep: peers of peers are never queried.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from ..domain.errors import PeerLookupError
from ..domain.models import PeerDependencies, UpgradeCandidate
from ..domain.versions import (
    compare_versions,
    highlight_diff,
    normalize_installed_version,
    split_version_and_mode,
    transform_peer_version,
)
from .ports import PeerDependencyLookup

logger = logging.getLogger(__name__)


def _peer_items(peers: PeerDependencies) -> Iterator[tuple[str, str]]:
    if isinstance(peers, Mapping):
        yield from peers.items()
    else:
        yield from peers


class PeerResolver:
    """Resolve the declared peers of a package against installed versions.

    Args:
        lookup: Async registry query returning a package's declared peers.

    Example:
        >>> import asyncio
        >>> async def lookup(name):
        ...     return {"bar": "^3.0.0"}
        >>> resolver = PeerResolver(lookup)
        >>> [c.to_dict() for c in asyncio.run(resolver.resolve("foo", {"bar": "^2.5.0"}))]
        [{'package': 'bar', 'version': '2.5.0', 'latestVersion': '3.0.0', 'isLatest': False, 'versionMode': '^'}]
    """

    def __init__(self, lookup: PeerDependencyLookup) -> None:
        self._lookup = lookup

    async def _declared_peers(self, package_name: str) -> PeerDependencies:
        try:
            return await self._lookup(package_name)
        except PeerLookupError as exc:
            logger.debug("No peer dependencies for %s: %s", package_name, exc)
            return {}

    async def resolve(
        self,
        package_name: str,
        installed: Mapping[str, str],
        explicit_peers: PeerDependencies | None = None,
    ) -> list[UpgradeCandidate]:
        """Return one candidate per declared peer that the project installs.

        Args:
            package_name: Package whose peers are expanded.
            installed: Project dependencies, package name to manifest entry.
            explicit_peers: Peers supplied by the caller; the registry is not
                queried when given.

        Returns:
            Candidates in declaration order, first occurrence of a name wins.
            Peers missing from ``installed`` are logged and left out.

        Raises:
            MalformedVersionError: If an installed entry or a peer range holds
                no usable version.
        """
        peers = explicit_peers if explicit_peers is not None else await self._declared_peers(package_name)

        candidates: list[UpgradeCandidate] = []
        seen: set[str] = set()
        for peer_name, peer_range in _peer_items(peers):
            if peer_name in seen:
                continue
            seen.add(peer_name)

            entry = installed.get(peer_name)
            if not entry:
                logger.warning(
                    "Missing peer dependency %s, check whether it is installed",
                    peer_name,
                    extra={"package": package_name, "peer": peer_name},
                )
                continue

            mode = split_version_and_mode(entry).mode
            current = normalize_installed_version(entry)
            target = transform_peer_version(peer_range)
            is_latest = compare_versions(current, target) >= 0
            candidates.append(
                UpgradeCandidate(
                    package=peer_name,
                    version=current,
                    latest_version=current if is_latest else target,
                    is_latest=is_latest,
                    version_mode=mode,
                    display_latest=current if is_latest else highlight_diff(current, target),
                )
            )
        return candidates


__all__ = ["PeerResolver"]
