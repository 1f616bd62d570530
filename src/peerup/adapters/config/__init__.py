"""Configuration adapter - loading, validation, display, and overrides.

Provides adapters for configuration management using lib_layered_config
and pydantic.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.settings` - ``[upgrade]`` and ``[registry]`` validation
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides
from .settings import PeerupSettings, RegistrySettings, UpgradeSettings, load_settings_from_dict

__all__ = [
    "PeerupSettings",
    "RegistrySettings",
    "UpgradeSettings",
    "apply_overrides",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_settings_from_dict",
]
