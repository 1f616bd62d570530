"""Upgrade and registry settings models and their loader.

Provides frozen Pydantic models for the ``[upgrade]`` and ``[registry]``
configuration sections and the loader that validates both at the boundary.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...application.engine import DEFAULT_THEME_PACKAGE, DEFAULT_UMBRELLA_PACKAGE
from ...domain.errors import ConfigurationError
from ...domain.models import UpgradeScope

DEFAULT_REGISTRY_URL = "https://registry.npmjs.org"


class UpgradeSettings(BaseModel):
    """Which packages an upgrade run treats as umbrella, theme and components.

    Example:
        >>> settings = UpgradeSettings()
        >>> settings.component_prefix
        '@nextui-org/'
        >>> settings.to_scope().umbrella_package
        '@nextui-org/react'
    """

    model_config = ConfigDict(frozen=True)

    umbrella_package: str = DEFAULT_UMBRELLA_PACKAGE
    theme_package: str = DEFAULT_THEME_PACKAGE
    component_prefix: str = "@nextui-org/"

    @field_validator("umbrella_package", "theme_package", "component_prefix")
    @classmethod
    def _reject_blank(cls, v: str) -> str:
        """Package names must not be empty or whitespace-only."""
        if not v.strip():
            raise ValueError("must not be empty")
        return v.strip()

    def to_scope(self) -> UpgradeScope:
        """Convert to the domain value object used by the use case."""
        return UpgradeScope(
            umbrella_package=self.umbrella_package,
            theme_package=self.theme_package,
            component_prefix=self.component_prefix,
        )


class RegistrySettings(BaseModel):
    """Where and how patiently to query the package registry.

    Example:
        >>> RegistrySettings(url="https://registry.example.org/").url
        'https://registry.example.org'
        >>> RegistrySettings(timeout=0)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValidationError: ...
    """

    model_config = ConfigDict(frozen=True)

    url: str = DEFAULT_REGISTRY_URL
    timeout: float = Field(default=10.0, gt=0)

    @field_validator("url")
    @classmethod
    def _normalize_url(cls, v: str) -> str:
        url = v.strip().rstrip("/")
        if not url.startswith(("http://", "https://")):
            raise ValueError(f"registry url must use http or https, got {v!r}")
        return url


class PeerupSettings(BaseModel):
    """Both validated sections of one configuration."""

    model_config = ConfigDict(frozen=True)

    upgrade: UpgradeSettings = Field(default_factory=UpgradeSettings)
    registry: RegistrySettings = Field(default_factory=RegistrySettings)


def load_settings_from_dict(config_dict: Mapping[str, Any]) -> PeerupSettings:
    """Load the ``[upgrade]`` and ``[registry]`` sections.

    Missing sections or keys fall back to the defaults.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.

    Raises:
        ConfigurationError: If a section holds values that do not validate.

    Example:
        >>> settings = load_settings_from_dict({"registry": {"timeout": 2.5}})
        >>> settings.registry.timeout
        2.5
        >>> settings.upgrade.theme_package
        '@nextui-org/theme'
        >>> load_settings_from_dict({"registry": {"timeout": -1}})  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        peerup.domain.errors.ConfigurationError: Invalid [registry] configuration: timeout
    """
    sections: dict[str, Any] = {}
    for name, model in (("upgrade", UpgradeSettings), ("registry", RegistrySettings)):
        raw: Any = config_dict.get(name, {})
        try:
            sections[name] = model.model_validate(raw if raw else {})
        except ValidationError as exc:
            details = "; ".join(
                f"{'.'.join(str(part) for part in error['loc']) or name}: {error['msg']}" for error in exc.errors()
            )
            raise ConfigurationError(f"Invalid [{name}] configuration: {details}") from exc
    return PeerupSettings(**sections)


__all__ = [
    "DEFAULT_REGISTRY_URL",
    "PeerupSettings",
    "RegistrySettings",
    "UpgradeSettings",
    "load_settings_from_dict",
]
