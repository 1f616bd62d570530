"""Semantic-version helpers for upgrade resolution.

Purpose
-------
Compare installed npm versions against registry targets, normalize the range
prefixes that ``package.json`` entries carry, collapse peer-dependency range
expressions into a concrete target and mark the changed part of a version
diff for display.

Contents
--------
* ``SemVer`` – parsed semantic version.
* ``parse_version`` – strict parser raising ``MalformedVersionError``.
* ``compare_versions`` – total order following semver precedence.
* ``strip_range_prefix`` – idempotent removal of ``^``/``~`` style prefixes.
* ``split_version_and_mode`` – separates a manifest entry into version and mode.
* ``transform_peer_version`` – minimum concrete version satisfying a range.
* ``normalize_installed_version`` – concrete version of a manifest entry.
* ``highlight_diff`` – Rich markup around the differing trailing segment.

System Role
-----------
Pure domain code. Markup is produced as Rich console markup strings so the
domain layer does not import any rendering library.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cmp_to_key
from typing import NamedTuple

from .errors import MalformedVersionError

__all__ = [
    "HIGHLIGHT_MAJOR",
    "HIGHLIGHT_MINOR",
    "HIGHLIGHT_PATCH",
    "SemVer",
    "VersionAndMode",
    "compare_versions",
    "highlight_diff",
    "normalize_installed_version",
    "parse_version",
    "split_version_and_mode",
    "strip_range_prefix",
    "transform_peer_version",
]

HIGHLIGHT_MAJOR = "bright_red"
HIGHLIGHT_MINOR = "bright_cyan"
HIGHLIGHT_PATCH = "bright_green"

# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
_RE_SEMVER = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-((?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)
_RE_PARTIAL = re.compile(
    r"^v?(\d+|[xX*])(?:\.(\d+|[xX*]))?(?:\.(\d+|[xX*]))?(?:-([0-9A-Za-z.-]+))?(?:\+[0-9A-Za-z.-]+)?$"
)
_RE_COMPARATOR = re.compile(r"^(<=|>=|<|>|=|\^|~>|~)?(.*)$")
_RE_OPERATOR_GAP = re.compile(r"(<=|>=|<|>|=|\^|~>|~)\s+")
_RANGE_PREFIX_CHARS = "^~=v "
_WILDCARDS = frozenset({"", "*", "x", "X", "latest"})


@dataclass(frozen=True, slots=True)
class SemVer:
    """A parsed semantic version.

    Example:
        >>> str(parse_version("1.2.3-beta.1+build.5"))
        '1.2.3-beta.1'
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()

    def __str__(self) -> str:
        core = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            return f"{core}-{'.'.join(self.prerelease)}"
        return core


class VersionAndMode(NamedTuple):
    """A manifest entry split into its bare version and range prefix."""

    version: str
    mode: str


def parse_version(text: str) -> SemVer:
    """Parse a strict semantic version string.

    Raises:
        MalformedVersionError: If ``text`` is not ``MAJOR.MINOR.PATCH`` with
            optional pre-release and build metadata.

    Example:
        >>> parse_version("10.0.1").minor
        0
        >>> parse_version("1.0")
        Traceback (most recent call last):
        ...
        peerup.domain.errors.MalformedVersionError: Malformed semantic version: '1.0'
    """
    match = _RE_SEMVER.match(text.strip())
    if not match:
        raise MalformedVersionError(text)
    major, minor, patch, prerelease, build = match.groups()
    return SemVer(
        major=int(major),
        minor=int(minor),
        patch=int(patch),
        prerelease=tuple(prerelease.split(".")) if prerelease else (),
        build=tuple(build.split(".")) if build else (),
    )


def _compare_identifiers(left: str, right: str) -> int:
    """Compare two pre-release identifiers."""
    left_numeric = left.isdigit()
    right_numeric = right.isdigit()
    if left_numeric and right_numeric:
        return (int(left) > int(right)) - (int(left) < int(right))
    # Numeric identifiers always have lower precedence than alphanumeric ones
    if left_numeric:
        return -1
    if right_numeric:
        return 1
    return (left > right) - (left < right)


def _compare_semver(left: SemVer, right: SemVer) -> int:
    left_core = (left.major, left.minor, left.patch)
    right_core = (right.major, right.minor, right.patch)
    if left_core != right_core:
        return 1 if left_core > right_core else -1

    if not left.prerelease or not right.prerelease:
        # A release outranks any of its pre-releases
        return (not left.prerelease) - (not right.prerelease)

    for left_id, right_id in zip(left.prerelease, right.prerelease):
        result = _compare_identifiers(left_id, right_id)
        if result:
            return result
    return (len(left.prerelease) > len(right.prerelease)) - (len(left.prerelease) < len(right.prerelease))


def compare_versions(left: str, right: str) -> int:
    """Order two versions by semantic-version precedence.

    A leading range prefix (``^``, ``~``) is tolerated on either side;
    build metadata is ignored.

    Returns:
        ``-1``, ``0`` or ``1``.

    Raises:
        MalformedVersionError: If either side is not a semantic version.

    Example:
        >>> compare_versions("1.0.0", "1.2.0")
        -1
        >>> compare_versions("^2.0.0", "2.0.0")
        0
        >>> compare_versions("1.0.0", "1.0.0-rc.1")
        1
    """
    return _compare_semver(
        parse_version(strip_range_prefix(left)),
        parse_version(strip_range_prefix(right)),
    )


def strip_range_prefix(version: str) -> str:
    """Remove leading range characters when a bare version remains.

    Inputs whose remainder is not a semantic version are returned unchanged,
    which keeps the function idempotent.

    Example:
        >>> strip_range_prefix("^1.2.3")
        '1.2.3'
        >>> strip_range_prefix("^^1.2.3")
        '1.2.3'
        >>> strip_range_prefix("workspace:*")
        'workspace:*'
    """
    bare = version.strip().lstrip(_RANGE_PREFIX_CHARS)
    if _RE_SEMVER.match(bare):
        return bare
    return version


def split_version_and_mode(entry: str) -> VersionAndMode:
    """Separate a manifest version entry into bare version and range mode.

    Example:
        >>> split_version_and_mode("^2.4.1")
        VersionAndMode(version='2.4.1', mode='^')
        >>> split_version_and_mode("2.4.1")
        VersionAndMode(version='2.4.1', mode='')
    """
    text = entry.strip()
    mode = text[0] if text[:1] in ("^", "~") else ""
    return VersionAndMode(version=strip_range_prefix(text), mode=mode)


def _parse_partial(text: str) -> tuple[SemVer, int] | None:
    """Parse ``1``, ``1.2``, ``1.x`` or a full version.

    Returns the version with wildcards zeroed and the number of concrete
    numeric parts, or ``None`` when ``text`` is not version-like.
    """
    match = _RE_PARTIAL.match(text)
    if not match:
        return None
    major, minor, patch, prerelease = match.groups()
    parts: list[int] = []
    for part in (major, minor, patch):
        if part is None or not part.isdigit():
            break
        parts.append(int(part))
    concrete = len(parts)
    parts.extend([0] * (3 - concrete))
    release = prerelease if concrete == 3 and prerelease else None
    return SemVer(parts[0], parts[1], parts[2], tuple(release.split(".")) if release else ()), concrete


def _bump(version: SemVer, concrete: int) -> SemVer:
    """Smallest version strictly greater than a (partial) version."""
    if concrete >= 3:
        if version.prerelease:
            return SemVer(version.major, version.minor, version.patch, (*version.prerelease, "0"))
        return SemVer(version.major, version.minor, version.patch + 1)
    if concrete == 2:
        return SemVer(version.major, version.minor + 1, 0)
    return SemVer(version.major + 1, 0, 0)


def _alternative_lower_bound(expression: str, original: str) -> SemVer:
    if " - " in expression:
        expression = expression.split(" - ", 1)[0]

    expression = _RE_OPERATOR_GAP.sub(r"\1", expression.strip())
    if expression in _WILDCARDS:
        return SemVer(0, 0, 0)

    lower = SemVer(0, 0, 0)
    for token in expression.split():
        operator, raw = _RE_COMPARATOR.match(token).groups()  # type: ignore[union-attr]
        parsed = _parse_partial(raw)
        if parsed is None:
            if raw in _WILDCARDS:
                continue
            raise MalformedVersionError(original)
        version, concrete = parsed
        if operator in ("<", "<="):
            continue
        if operator == ">":
            version = _bump(version, concrete)
        if _compare_semver(version, lower) > 0:
            lower = version
    return lower


def transform_peer_version(expression: str) -> str:
    """Collapse a peer-dependency range into its minimum satisfying version.

    Example:
        >>> transform_peer_version("^3.0.0")
        '3.0.0'
        >>> transform_peer_version(">=10.17.0 || >=11.0")
        '10.17.0'
        >>> transform_peer_version(">=2.1 <3")
        '2.1.0'
        >>> transform_peer_version("*")
        '0.0.0'
    """
    text = expression.strip()
    if text in _WILDCARDS:
        return "0.0.0"
    alternatives = [alt.strip() for alt in text.split("||")]
    bounds = [_alternative_lower_bound(alt, expression) for alt in alternatives]
    return str(min(bounds, key=cmp_to_key(_compare_semver)))


def highlight_diff(current: str, target: str) -> str:
    """Wrap the changed trailing part of ``target`` in Rich markup.

    A major change marks the whole version, a minor change everything after
    the major segment and a patch (or pre-release) change everything after
    the minor segment.

    Example:
        >>> highlight_diff("1.2.3", "1.2.4")
        '1.2.[bright_green]4[/bright_green]'
        >>> highlight_diff("1.2.3", "1.3.0")
        '1.[bright_cyan]3.0[/bright_cyan]'
        >>> highlight_diff("^1.2.3", "2.0.0")
        '[bright_red]2.0.0[/bright_red]'
        >>> highlight_diff("1.2.3", "1.2.3")
        '1.2.3'
    """
    current_parts = strip_range_prefix(current).split(".")
    bare_target = strip_range_prefix(target)
    target_parts = bare_target.split(".")

    if current_parts[:1] != target_parts[:1]:
        return f"[{HIGHLIGHT_MAJOR}]{bare_target}[/{HIGHLIGHT_MAJOR}]"
    if current_parts[1:2] != target_parts[1:2]:
        rest = ".".join(target_parts[1:])
        return f"{target_parts[0]}.[{HIGHLIGHT_MINOR}]{rest}[/{HIGHLIGHT_MINOR}]"
    if current_parts[2:] != target_parts[2:]:
        head = ".".join(target_parts[:2])
        rest = ".".join(target_parts[2:])
        return f"{head}.[{HIGHLIGHT_PATCH}]{rest}[/{HIGHLIGHT_PATCH}]"
    return bare_target


def normalize_installed_version(entry: str) -> str:
    """Return the concrete version a manifest entry stands for.

    Plain prefixed versions keep their build metadata; anything else is
    collapsed like a peer range.

    Raises:
        MalformedVersionError: If ``entry`` holds no version at all.

    Example:
        >>> normalize_installed_version("^2.5.0")
        '2.5.0'
        >>> normalize_installed_version(">=1.4")
        '1.4.0'
    """
    bare = strip_range_prefix(entry)
    if _RE_SEMVER.match(bare):
        return bare
    return transform_peer_version(entry)
