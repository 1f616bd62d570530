"""Static package metadata surfaced to CLI commands and documentation.

The ``version`` line is kept in sync with ``pyproject.toml`` on release.

Contents:
    * Module-level metadata constants (name, version, shell command).
    * ``LAYEREDCONF_*`` identifiers used to locate configuration files.
    * :func:`print_info` - render the metadata block for ``peerup info``.
"""

from __future__ import annotations

name = "peerup"
title = "Resolve outdated npm components and their peer dependencies"
version = "0.4.0"
author = "peerup contributors"
shell_command = "peerup"

#: Vendor, application and slug identifiers for lib_layered_config paths.
LAYEREDCONF_VENDOR = "peerup"
LAYEREDCONF_APP = "peerup"
LAYEREDCONF_SLUG = "peerup"


def print_info() -> None:
    """Print the summarised metadata block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for peerup:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
