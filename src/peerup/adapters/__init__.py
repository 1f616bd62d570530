"""Adapters layer - infrastructure and framework integrations.

Contains adapter implementations that connect the application to external
systems and frameworks (CLI, configuration, npm registry, logging).

Contents:
    * :mod:`.config` - Configuration loading, validation, and display
    * :mod:`.registry` - npm registry client over httpx
    * :mod:`.manifest` - ``package.json`` reading and lockfile detection
    * :mod:`.output` - Rich panels for report sections
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory implementations for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
