"""Column-aligned rendering of upgrade candidates.

Contents:
    * :class:`ColumnWidths` - maximum width per display field.
    * :func:`compute_columns` - measure a candidate list.
    * :func:`render_section` - one aligned line per candidate.
    * :func:`render_report` - both report sections at once.
    * :data:`REPORT_SECTIONS` - labels and label colors of the two sections.

Rows carry Rich console markup (the highlighted target version and the
``latest`` marker); widths are measured on the bare values so markup never
skews the alignment.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .models import UpgradeCandidate

DEFAULT_SPACE = " " * 7
LATEST_MARKER = "latest"
ARROW = "  ->  "
INDENT = "  "


@dataclass(slots=True)
class ColumnWidths:
    """Running maximum of the three rendered fields.

    Example:
        >>> widths = ColumnWidths()
        >>> widths.track(UpgradeCandidate("react-dom", "18.0.0", "18.3.1", False, "^"))
        >>> (widths.package, widths.version, widths.latest)
        (9, 7, 7)
    """

    package: int = 0
    version: int = 0
    latest: int = 0

    def track(self, candidate: UpgradeCandidate) -> None:
        mode = candidate.version_mode
        self.package = max(self.package, len(candidate.package))
        self.version = max(self.version, len(f"{mode}{candidate.version}"))
        self.latest = max(self.latest, len(f"{mode}{candidate.latest_version}"))


@dataclass(frozen=True, slots=True)
class ReportSection:
    """Label of one rendered block and the color used for the label only."""

    title: str
    color: str


COMPONENTS_SECTION = ReportSection(title="Components", color="blue")
PEER_DEPENDENCIES_SECTION = ReportSection(title="PeerDependencies", color="yellow")
REPORT_SECTIONS: tuple[ReportSection, ReportSection] = (COMPONENTS_SECTION, PEER_DEPENDENCIES_SECTION)


@dataclass(frozen=True, slots=True)
class UpgradeReport:
    """Rendered text of both report sections."""

    primary_text: str
    peer_text: str


def compute_columns(candidates: Sequence[UpgradeCandidate]) -> ColumnWidths:
    """Return the maximum width of each display field across ``candidates``."""
    widths = ColumnWidths()
    for candidate in candidates:
        widths.track(candidate)
    return widths


def _latest_row(candidate: UpgradeCandidate, widths: ColumnWidths) -> str:
    label = f"{candidate.package}@{candidate.version_mode}{candidate.version}"
    padded = label.ljust(widths.package + 2 * len(DEFAULT_SPACE))
    return f"{INDENT}{padded}[bright_green]{LATEST_MARKER.rjust(widths.version)}[/bright_green]"


def _upgrade_row(candidate: UpgradeCandidate, widths: ColumnWidths) -> str:
    mode = candidate.version_mode
    name = candidate.package.ljust(widths.package + len(DEFAULT_SPACE))
    current = f"{mode}{candidate.version}".ljust(widths.version)
    return f"{INDENT}{name}{DEFAULT_SPACE}{current}{ARROW}{mode}{candidate.display_latest}"


def render_section(candidates: Sequence[UpgradeCandidate], *, peer: bool = False) -> str:
    """Render one aligned line per candidate.

    Args:
        candidates: Candidates of one report section.
        peer: Peer-dependency section; candidates that are already latest
            are left out.

    Returns:
        Newline-joined rows, or an empty string when nothing is rendered.

    Example:
        >>> rows = [UpgradeCandidate("foo", "1.0.0", "1.2.0", False, display_latest="1.2.0")]
        >>> render_section(rows).split()
        ['foo', '1.0.0', '->', '1.2.0']
        >>> render_section([])
        ''
    """
    if not candidates:
        return ""

    widths = compute_columns(candidates)
    lines: list[str] = []
    for candidate in candidates:
        if candidate.is_latest:
            if peer:
                continue
            lines.append(_latest_row(candidate, widths))
            continue
        lines.append(_upgrade_row(candidate, widths))
    return "\n".join(lines)


def render_report(
    primary: Sequence[UpgradeCandidate],
    peers: Sequence[UpgradeCandidate],
) -> UpgradeReport:
    """Render the component section and the peer-dependency section."""
    return UpgradeReport(
        primary_text=render_section(primary),
        peer_text=render_section(peers, peer=True),
    )


__all__ = [
    "COMPONENTS_SECTION",
    "ColumnWidths",
    "PEER_DEPENDENCIES_SECTION",
    "REPORT_SECTIONS",
    "ReportSection",
    "UpgradeReport",
    "compute_columns",
    "render_report",
    "render_section",
]
