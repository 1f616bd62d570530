"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when the ``[upgrade]`` or ``[registry]`` sections hold values that
    cannot be parsed. Typically caught at CLI boundaries to provide
    user-friendly error messages.

    Example:
        >>> from peerup.domain.errors import ConfigurationError
        >>> err = ConfigurationError("registry.timeout must be positive")
        >>> str(err)
        'registry.timeout must be positive'
    """


class MalformedVersionError(ValueError):
    """A version string is not a valid semantic version.

    Comparison never falls back to an arbitrary ordering; the whole
    resolution call is aborted instead.

    Example:
        >>> err = MalformedVersionError("not-a-version")
        >>> err.version
        'not-a-version'
        >>> str(err)
        "Malformed semantic version: 'not-a-version'"
        >>> isinstance(err, ValueError)
        True
    """

    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"Malformed semantic version: {version!r}")


class PeerLookupError(Exception):
    """The registry query for a package's peer dependencies failed.

    Peer resolution treats this as "no peer dependencies".
    """


class RegistryError(Exception):
    """The registry could not provide the latest version of a package.

    Example:
        >>> str(RegistryError("@nextui-org/react: HTTP 503"))
        '@nextui-org/react: HTTP 503'
    """


class ManifestError(Exception):
    """The project manifest (``package.json``) is missing or unreadable."""


class UnknownComponentError(ValueError):
    """Requested components are not installed in the project.

    Example:
        >>> err = UnknownComponentError(["@nextui-org/nope", "@nextui-org/gone"])
        >>> err.names
        ('@nextui-org/nope', '@nextui-org/gone')
        >>> str(err)
        'Unknown components: @nextui-org/nope, @nextui-org/gone'
    """

    def __init__(self, names: list[str] | tuple[str, ...]) -> None:
        self.names = tuple(names)
        super().__init__(f"Unknown components: {', '.join(self.names)}")


__all__ = [
    "ConfigurationError",
    "MalformedVersionError",
    "ManifestError",
    "PeerLookupError",
    "RegistryError",
    "UnknownComponentError",
]
