"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.config.settings import load_settings_from_dict

# Logging services
from ..adapters.logging.setup import init_logging

# Project services
from ..adapters.manifest import detect_package_manager, read_manifest
from ..adapters.output import RichOutputBox
from ..adapters.registry import open_registry

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory import InMemoryManifests, InMemoryRegistry, OutputBoxSpy
    from ..application.ports import (
        DetectPackageManager,
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadSettingsFromDict,
        OpenRegistry,
        OutputBox,
        ReadManifest,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_load_settings_from_dict: LoadSettingsFromDict = load_settings_from_dict
    _assert_init_logging: InitLogging = init_logging
    _assert_read_manifest: ReadManifest = read_manifest
    _assert_detect_package_manager: DetectPackageManager = detect_package_manager
    _assert_open_registry: OpenRegistry = open_registry
    _assert_output_box: OutputBox = RichOutputBox()


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    load_settings_from_dict: LoadSettingsFromDict
    init_logging: InitLogging
    read_manifest: ReadManifest
    detect_package_manager: DetectPackageManager
    open_registry: OpenRegistry
    output_box: OutputBox


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        load_settings_from_dict=load_settings_from_dict,
        init_logging=init_logging,
        read_manifest=read_manifest,
        detect_package_manager=detect_package_manager,
        open_registry=open_registry,
        output_box=RichOutputBox(),
    )


def build_testing(
    *,
    registry: InMemoryRegistry | None = None,
    manifests: InMemoryManifests | None = None,
    output: OutputBoxSpy | None = None,
) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        registry: Canned registry; an empty one when None.
        manifests: Manifests served by path; none when None.
        output: Spy capturing report sections; a fresh one when None. Pass
            your own spy to assert on the rendered report.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        InMemoryManifests,
        InMemoryRegistry,
        OutputBoxSpy,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
        load_settings_from_dict_in_memory,
    )

    canned_registry = registry if registry is not None else InMemoryRegistry()
    manifest_store = manifests if manifests is not None else InMemoryManifests()

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        load_settings_from_dict=load_settings_from_dict_in_memory,
        init_logging=init_logging_in_memory,
        read_manifest=manifest_store.read,
        detect_package_manager=manifest_store.detect,
        open_registry=canned_registry.open,
        output_box=output if output is not None else OutputBoxSpy(),
    )


__all__ = [
    # Configuration
    "display_config",
    "get_config",
    "load_settings_from_dict",
    # Logging
    "init_logging",
    # Project
    "detect_package_manager",
    "open_registry",
    "read_manifest",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
