"""In-memory adapter implementations for testing.

Provides lightweight implementations of all application ports that operate
entirely in memory -- no filesystem, no network, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.logging` - In-memory logging adapter
    * :mod:`.manifest` - In-memory manifests (InMemoryManifests class)
    * :mod:`.output` - Report capture (OutputBoxSpy class)
    * :mod:`.registry` - Canned registry (InMemoryRegistry class)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
    load_settings_from_dict_in_memory,
)
from .logging import init_logging_in_memory
from .manifest import InMemoryManifests
from .output import CapturedBox, OutputBoxSpy
from .registry import InMemoryRegistry

# Static conformance assertions
if TYPE_CHECKING:
    from ...application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadSettingsFromDict,
        OutputBox,
        Registry,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_load_settings: LoadSettingsFromDict = load_settings_from_dict_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_output_box: OutputBox = OutputBoxSpy()
    _assert_registry: Registry = InMemoryRegistry()

__all__ = [
    "CapturedBox",
    "InMemoryManifests",
    "InMemoryRegistry",
    "OutputBoxSpy",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
    "load_settings_from_dict_in_memory",
]
