"""
infinilist – lazy, memoized, possibly unbounded sequences.

Import path convention::

    from infinilist import InfiniteList, Lazy, maybe
    from infinilist.kernel.errors import ExhaustedError
    from infinilist.config import EnvSettingsLoader, InfinilistSettings
"""

from infinilist.kernel.types import Lazy, Maybe, Nothing, Some, maybe
from infinilist.sequence import InfiniteList

__version__ = "0.1.0"
__all__ = ["InfiniteList", "Lazy", "Maybe", "Nothing", "Some", "__version__", "maybe"]
