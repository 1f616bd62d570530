"""Render the merged configuration for ``peerup config``.

Rendering itself is lib_layered_config's; this module maps peerup's
:class:`~peerup.domain.enums.OutputFormat` onto the library's and keeps
queued log records from interleaving with the printed TOML or JSON.

Contents:
    * :func:`display_config` - print all sections or a single one.
"""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _render
from rich.console import Console

from ...domain.enums import OutputFormat


def _drain_log_queue() -> None:
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Print ``config``, optionally narrowed to ``section``.

    Human output is TOML with a provenance comment per key naming the
    layer (and ``profile``) it came from; JSON output is the plain tree.

    Args:
        config: Configuration loaded by ``get_config``.
        output_format: TOML-like text or JSON.
        section: Only this top-level section, e.g. ``"registry"``.
        console: Rich console to print to; stdout when None.
        profile: Profile named in the provenance comments.

    Raises:
        ValueError: If ``section`` is not in ``config``.
    """
    _drain_log_queue()
    _render(
        config,
        output_format=LibOutputFormat(output_format.value),
        section=section,
        profile=profile,
        console=console,
    )


__all__ = ["display_config"]
