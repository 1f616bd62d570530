"""Upgrade resolution for an umbrella package or a set of components.

Contents:
    * :class:`UpgradeRequest` - input of one resolution call.
    * :class:`UpgradeEngine` - classify primaries, expand their peers, report.
    * :func:`gather_in_order` - concurrent fan-out joined in input order.

System Role:
    Orchestrates :class:`~peerup.application.peers.PeerResolver` and the
    report rendering in :mod:`peerup.domain.report`. The report is handed to
    the :class:`~peerup.application.ports.OutputBox` port; the engine itself
    never prints.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import TypeVar

from ..domain.models import PeerDependencies, UpgradeCandidate
from ..domain.report import COMPONENTS_SECTION, PEER_DEPENDENCIES_SECTION, UpgradeReport, render_report
from ..domain.versions import (
    compare_versions,
    highlight_diff,
    normalize_installed_version,
    split_version_and_mode,
    strip_range_prefix,
)
from .peers import PeerResolver
from .ports import OutputBox

logger = logging.getLogger(__name__)

DEFAULT_UMBRELLA_PACKAGE = "@nextui-org/react"
DEFAULT_THEME_PACKAGE = "@nextui-org/theme"

T = TypeVar("T")


async def gather_in_order(awaitables: Iterable[Awaitable[T]]) -> list[T]:
    """Run ``awaitables`` concurrently and return their results in input order.

    Every awaitable runs to completion even when another one fails; the first
    failure in input order is raised afterwards.

    Example:
        >>> async def double(value):
        ...     return value * 2
        >>> asyncio.run(gather_in_order([double(1), double(2)]))
        [2, 4]
    """
    tasks = [asyncio.ensure_future(awaitable) for awaitable in awaitables]
    outcomes = await asyncio.gather(*tasks, return_exceptions=True)
    results: list[T] = []
    for outcome in outcomes:
        if isinstance(outcome, BaseException):
            raise outcome
        results.append(outcome)
    return results


@dataclass(frozen=True, slots=True)
class UpgradeRequest:
    """Input of :meth:`UpgradeEngine.resolve`.

    Build instances through :meth:`umbrella` or :meth:`components`.

    Attributes:
        is_umbrella: Umbrella mode when True, multi-component mode otherwise.
        all_dependencies: Installed packages, name to manifest entry.
        candidates: Primary candidates (multi-component mode only).
        latest_version: Latest published umbrella version (umbrella mode only).
        umbrella_package: Name of the umbrella package.
        theme_package: Companion package whose peers are resolved with the
            umbrella's.

    Example:
        >>> UpgradeRequest.umbrella({"react": "18.0.0"}, "18.3.1", umbrella_package="vue")
        Traceback (most recent call last):
        ...
        ValueError: umbrella package 'vue' is not installed
    """

    is_umbrella: bool
    all_dependencies: Mapping[str, str]
    candidates: tuple[UpgradeCandidate, ...] = ()
    latest_version: str | None = None
    umbrella_package: str = DEFAULT_UMBRELLA_PACKAGE
    theme_package: str = DEFAULT_THEME_PACKAGE

    def __post_init__(self) -> None:
        if not self.is_umbrella:
            return
        if not self.latest_version:
            raise ValueError("umbrella mode requires the latest umbrella version")
        if self.umbrella_package not in self.all_dependencies:
            raise ValueError(f"umbrella package {self.umbrella_package!r} is not installed")

    @classmethod
    def umbrella(
        cls,
        all_dependencies: Mapping[str, str],
        latest_version: str,
        *,
        umbrella_package: str = DEFAULT_UMBRELLA_PACKAGE,
        theme_package: str = DEFAULT_THEME_PACKAGE,
    ) -> UpgradeRequest:
        """Request for the umbrella package and its theme companion."""
        return cls(
            is_umbrella=True,
            all_dependencies=all_dependencies,
            latest_version=latest_version,
            umbrella_package=umbrella_package,
            theme_package=theme_package,
        )

    @classmethod
    def components(
        cls,
        all_dependencies: Mapping[str, str],
        candidates: Sequence[UpgradeCandidate],
    ) -> UpgradeRequest:
        """Request for individually installed components."""
        return cls(is_umbrella=False, all_dependencies=all_dependencies, candidates=tuple(candidates))


class UpgradeEngine:
    """Decide which packages need upgrading and report the diff.

    Args:
        peer_resolver: Expands one package's peers into candidates.
        output_box: Receives each rendered report section.
    """

    def __init__(self, peer_resolver: PeerResolver, output_box: OutputBox) -> None:
        self._peer_resolver = peer_resolver
        self._output_box = output_box

    async def resolve(self, request: UpgradeRequest) -> list[UpgradeCandidate]:
        """Return the candidates that need an upgrade.

        Umbrella mode yields the umbrella followed by its stale peers, or an
        empty list when the umbrella is current. Multi-component mode yields
        the stale primaries followed by the stale peers.

        Raises:
            MalformedVersionError: If any version involved is not usable.
        """
        if request.is_umbrella:
            result = await self._resolve_umbrella(request)
        else:
            result = await self._resolve_components(request)
        logger.info("Resolved %d upgrade candidates", len(result), extra={"umbrella": request.is_umbrella})
        return result

    async def _resolve_umbrella(self, request: UpgradeRequest) -> list[UpgradeCandidate]:
        entry = request.all_dependencies[request.umbrella_package]
        current = normalize_installed_version(entry)
        target = strip_range_prefix(request.latest_version or "")
        umbrella = UpgradeCandidate(
            package=request.umbrella_package,
            version=current,
            latest_version=target,
            is_latest=compare_versions(current, target) >= 0,
            version_mode=split_version_and_mode(entry).mode,
            display_latest=highlight_diff(current, target),
        )

        peers = await self._resolve_peers(
            [(request.umbrella_package, None), (request.theme_package, None)],
            request.all_dependencies,
        )
        self.report([umbrella], peers)

        if umbrella.is_latest:
            return []
        return [umbrella, *(peer for peer in peers if not peer.is_latest)]

    async def _resolve_components(self, request: UpgradeRequest) -> list[UpgradeCandidate]:
        primaries = [candidate.normalized() for candidate in request.candidates]
        peers = await self._resolve_peers(
            [(candidate.package, candidate.peer_dependencies) for candidate in request.candidates],
            request.all_dependencies,
        )
        self.report(primaries, peers)
        return [candidate for candidate in (*primaries, *peers) if not candidate.is_latest]

    async def _resolve_peers(
        self,
        targets: Sequence[tuple[str, PeerDependencies | None]],
        installed: Mapping[str, str],
    ) -> list[UpgradeCandidate]:
        resolved = await gather_in_order(
            self._peer_resolver.resolve(package, installed, explicit_peers) for package, explicit_peers in targets
        )
        return [candidate for candidates in resolved for candidate in candidates]

    def report(self, primary: Sequence[UpgradeCandidate], peers: Sequence[UpgradeCandidate]) -> UpgradeReport:
        """Render both sections and pass them to the output box."""
        report = render_report(primary, peers)
        self._output_box(title=COMPONENTS_SECTION.title, color=COMPONENTS_SECTION.color, text=report.primary_text)
        self._output_box(
            title=PEER_DEPENDENCIES_SECTION.title,
            color=PEER_DEPENDENCIES_SECTION.color,
            text=report.peer_text,
        )
        return report


__all__ = [
    "DEFAULT_THEME_PACKAGE",
    "DEFAULT_UMBRELLA_PACKAGE",
    "UpgradeEngine",
    "UpgradeRequest",
    "gather_in_order",
]
