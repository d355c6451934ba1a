"""Kernel value types — public re-export surface.

Modules:
  maybe.py — Some, Nothing, Maybe and the none/some/of factories
  lazy.py  — Lazy
"""

from infinilist.kernel.types import maybe
from infinilist.kernel.types.lazy import Lazy
from infinilist.kernel.types.maybe import NOTHING, Maybe, Nothing, Some

__all__ = ["Lazy", "Maybe", "NOTHING", "Nothing", "Some", "maybe"]
