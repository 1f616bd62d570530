"""Rich panel output of report sections."""

from __future__ import annotations

import lib_log_rich.runtime
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.text import Text


class RichOutputBox:
    """Draw each report section as a rounded panel with a colored title.

    Empty sections are skipped. Pending log output is flushed first so log
    lines never end up inside the report.

    Args:
        console: Target console; a stdout console when omitted.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def __call__(self, *, title: str, color: str, text: str) -> None:
        if not text:
            return
        if lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.flush()
        self._console.print(
            Panel(
                Text.from_markup(text),
                title=f"[{color}]{title}[/{color}]",
                title_align="left",
                border_style="dim",
                box=box.ROUNDED,
                expand=False,
                padding=(0, 1),
            )
        )


__all__ = ["RichOutputBox"]
