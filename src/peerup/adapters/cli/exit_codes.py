"""Exit codes for CLI error paths.

Every ``SystemExit`` raised by a command carries one of these values.
Signal codes are informational only; ``lib_cli_exit_tools`` translates
signals itself.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes following errno and sysexits.h where one fits.

    * 0–1: generic success / failure
    * 2: ENOENT, no ``package.json`` at the given path
    * 3: nothing to upgrade, the manifest holds no known package
    * 22: EINVAL
    * 69: EX_UNAVAILABLE, the registry could not be queried
    * 78: EX_CONFIG
    * 128+N: signal N (informational only)

    Example:
        >>> int(ExitCode.REGISTRY_UNAVAILABLE)
        69
        >>> ExitCode(3).name
        'NO_COMPONENTS'
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    FILE_NOT_FOUND = 2
    NO_COMPONENTS = 3
    INVALID_ARGUMENT = 22
    REGISTRY_UNAVAILABLE = 69
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
