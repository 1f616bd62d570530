"""Layered configuration loading for peerup.

Configuration is read once per ``(profile, start_dir)`` pair with
``lib_layered_config`` in the precedence order
defaults → app → host → user → dotenv → env, starting from the
``defaultconfig.toml`` shipped next to this module.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from ... import __init__conf__

DEFAULT_CONFIG_FILENAME = "defaultconfig.toml"


class ConfigLoaderProtocol(Protocol):
    """Cached config loader exposing ``cache_clear`` for tests."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Reject profile names that are empty, too long or escape the config tree.

    Raises:
        ValueError: If ``profile`` is not a valid profile name.

    Examples:
        >>> validate_profile("ci")

        >>> validate_profile("../ci")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../ci
    """
    validate_profile_name(profile, max_length=max_length if max_length is not None else DEFAULT_MAX_PROFILE_LENGTH)


def get_default_config_path() -> Path:
    """Path of the bundled default configuration.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / DEFAULT_CONFIG_FILENAME


@lru_cache(maxsize=4)
def _read_layers(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load the layered configuration.

    Args:
        profile: Optional profile; inserts ``profile/<name>/`` into every
            configuration path.
        start_dir: Directory that seeds ``.env`` discovery; the working
            directory when None.

    Raises:
        ValueError: If ``profile`` is not a valid profile name.

    Example:
        >>> get_config().get("registry", default={})["url"]
        'https://registry.npmjs.org'
    """
    if profile is not None:
        validate_profile(profile)
    return _read_layers(profile=profile, start_dir=start_dir)


_get_config.cache_clear = _read_layers.cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
