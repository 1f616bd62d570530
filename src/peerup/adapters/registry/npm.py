"""npm registry adapter over ``httpx.AsyncClient``.

Each package's ``latest`` document is fetched at most once per
:class:`NpmRegistry` instance. Callers that ask for the same package while
the request is still running await the same task, so a run never issues
duplicate requests.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, cast
from urllib.parse import quote

import httpx
import orjson

from ...domain.errors import PeerLookupError, RegistryError
from ..config.settings import RegistrySettings

logger = logging.getLogger(__name__)


def escape_package_name(package_name: str) -> str:
    """Escape a package name for use as a registry path segment.

    Example:
        >>> escape_package_name("@nextui-org/react")
        '@nextui-org%2Freact'
        >>> escape_package_name("react")
        'react'
    """
    return quote(package_name, safe="@")


class NpmRegistry:
    """Registry session answering latest-version and peer-dependency queries.

    Args:
        settings: Registry URL and request timeout.
        client: Pre-built client; the session closes only clients it created.
    """

    def __init__(self, settings: RegistrySettings, *, client: httpx.AsyncClient | None = None) -> None:
        self._base_url = settings.url
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=settings.timeout,
            follow_redirects=True,
            headers={"Accept": "application/json"},
        )
        self._documents: dict[str, asyncio.Task[dict[str, Any]]] = {}

    async def _fetch_latest(self, package_name: str) -> dict[str, Any]:
        url = f"{self._base_url}/{escape_package_name(package_name)}/latest"
        logger.debug("Fetching %s", url)
        response = await self._client.get(url)
        response.raise_for_status()
        data = orjson.loads(response.content)
        if not isinstance(data, dict):
            raise ValueError("registry response is not a JSON object")
        return cast(dict[str, Any], data)

    def _latest_document(self, package_name: str) -> asyncio.Task[dict[str, Any]]:
        task = self._documents.get(package_name)
        if task is None:
            task = asyncio.ensure_future(self._fetch_latest(package_name))
            self._documents[package_name] = task
        return task

    async def get_latest_version(self, package_name: str) -> str:
        """Return the version tagged ``latest``.

        Raises:
            RegistryError: On transport errors, HTTP errors or an unusable body.
        """
        try:
            document = await self._latest_document(package_name)
        except (httpx.HTTPError, ValueError) as exc:
            raise RegistryError(f"{package_name}: {exc}") from exc

        version = document.get("version")
        if not isinstance(version, str) or not version:
            raise RegistryError(f"{package_name}: registry response carries no version")
        return version

    async def query_peer_dependencies(self, package_name: str) -> dict[str, str]:
        """Return the ``peerDependencies`` of the latest release.

        Raises:
            PeerLookupError: On transport errors, HTTP errors or an unusable body.
        """
        try:
            document = await self._latest_document(package_name)
        except (httpx.HTTPError, ValueError) as exc:
            raise PeerLookupError(f"{package_name}: {exc}") from exc

        peers: Any = document.get("peerDependencies") or {}
        if not isinstance(peers, dict):
            raise PeerLookupError(f"{package_name}: peerDependencies is not an object")
        return {str(name): str(spec) for name, spec in cast(dict[str, Any], peers).items()}

    async def aclose(self) -> None:
        """Close the HTTP client when this session created it."""
        for task in self._documents.values():
            if not task.done():
                task.cancel()
        if self._owns_client:
            await self._client.aclose()


def open_registry(settings: RegistrySettings) -> NpmRegistry:
    """Open a registry session; satisfies the ``OpenRegistry`` port."""
    return NpmRegistry(settings)


__all__ = ["NpmRegistry", "escape_package_name", "open_registry"]
