"""In-memory package registry for testing.

Contents:
    * :class:`InMemoryRegistry` - canned latest versions and peers with call
      recording; satisfies the ``Registry`` protocol.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from dataclasses import dataclass, field

from ...domain.errors import PeerLookupError, RegistryError
from ...domain.models import PeerDependencies


def _empty_calls() -> list[tuple[str, str]]:
    return []


@dataclass
class InMemoryRegistry:
    """Registry answering from dictionaries.

    Packages without a latest version raise ``RegistryError``; packages
    without declared peers return an empty mapping. Names in
    ``failing_peers`` raise ``PeerLookupError``.

    Attributes:
        latest_versions: Package name to latest version.
        peers: Package name to declared peers.
        failing_peers: Packages whose peer query fails.
        calls: ``(operation, package)`` in call order.
        closed: Set by :meth:`aclose`.

    Example:
        >>> registry = InMemoryRegistry(latest_versions={"foo": "1.2.0"})
        >>> asyncio.run(registry.get_latest_version("foo"))
        '1.2.0'
        >>> registry.calls
        [('latest', 'foo')]
    """

    latest_versions: Mapping[str, str] = field(default_factory=dict)
    peers: Mapping[str, PeerDependencies] = field(default_factory=dict)
    failing_peers: frozenset[str] = frozenset()
    calls: list[tuple[str, str]] = field(default_factory=_empty_calls)
    closed: bool = False

    async def get_latest_version(self, package_name: str) -> str:
        self.calls.append(("latest", package_name))
        await asyncio.sleep(0)
        try:
            return self.latest_versions[package_name]
        except KeyError:
            raise RegistryError(f"{package_name}: not found") from None

    async def query_peer_dependencies(self, package_name: str) -> PeerDependencies:
        self.calls.append(("peers", package_name))
        await asyncio.sleep(0)
        if package_name in self.failing_peers:
            raise PeerLookupError(f"{package_name}: lookup failed")
        return self.peers.get(package_name, {})

    async def aclose(self) -> None:
        self.closed = True

    def open(self, settings: object) -> InMemoryRegistry:
        """Satisfies the ``OpenRegistry`` port by handing out this instance."""
        return self


__all__ = ["InMemoryRegistry"]
