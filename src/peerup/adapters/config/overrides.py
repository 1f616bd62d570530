"""``--set SECTION.KEY=VALUE`` overrides layered on top of the loaded Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Values an override can carry after JSON coercion."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` assignment split into section, key path and value."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def coerce_value(raw: str) -> CoercedValue:
    """Interpret ``raw`` as JSON, keeping it as a string when that fails.

    Examples:
        >>> coerce_value("2.5")
        2.5
        >>> coerce_value("false")
        False
        >>> coerce_value("@acme/ui")
        '@acme/ui'
    """
    if not raw:
        return raw
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``.

    Everything after the first ``=`` is the value, so values may contain
    ``=`` and dots.

    Raises:
        ValueError: If ``=`` is missing, the key has no dot, or a path
            component is empty.

    Examples:
        >>> parse_override("registry.timeout=2.5")
        ConfigOverride(section='registry', key_path=('timeout',), value=2.5)
        >>> parse_override("upgrade.umbrella_package=@heroui/react").value
        '@heroui/react'
        >>> parse_override("registry")
        Traceback (most recent call last):
        ...
        ValueError: Invalid override 'registry': expected SECTION.KEY=VALUE
    """
    path, sep, value = raw.partition("=")
    if not sep or "." not in path:
        raise ValueError(f"Invalid override {raw!r}: expected SECTION.KEY=VALUE")

    section, *keys = path.split(".")
    if not section or not all(keys):
        raise ValueError(f"Invalid override {raw!r}: empty section or key")
    return ConfigOverride(section=section, key_path=tuple(keys), value=coerce_value(value))


def _merge_into(tree: dict[str, object], override: ConfigOverride) -> None:
    node = cast("dict[str, object]", tree.setdefault(override.section, {}))
    for key in override.key_path[:-1]:
        child = node.setdefault(key, {})
        if not isinstance(child, dict):
            raise TypeError(f"Cannot set {key!r}.*: it already holds {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every override deep-merged in.

    Raises:
        ValueError: If an override is malformed.

    Examples:
        >>> cfg = Config({"registry": {"timeout": 10.0}}, {})
        >>> apply_overrides(cfg, ("registry.timeout=3",))["registry"]["timeout"]
        3
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    tree: dict[str, object] = {}
    for raw in raw_overrides:
        _merge_into(tree, parse_override(raw))
    return config.with_overrides(tree)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
