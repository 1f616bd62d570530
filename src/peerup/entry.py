"""Console script entry point with production wiring.

Lives at package level, outside the adapters, so that composition can be
wired into the CLI without an adapter importing the composition root.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the ``peerup`` console script with production services."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
