"""Package registry adapter.

Contents:
    * :mod:`.npm` - npm registry session over httpx
"""

from __future__ import annotations

from .npm import NpmRegistry, escape_package_name, open_registry

__all__ = ["NpmRegistry", "escape_package_name", "open_registry"]
