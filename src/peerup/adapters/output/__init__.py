"""Terminal output adapters.

Contents:
    * :mod:`.box` - Rich panel rendering of report sections
"""

from __future__ import annotations

from .box import RichOutputBox

__all__ = ["RichOutputBox"]
