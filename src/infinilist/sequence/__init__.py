"""Lazy sequences."""

from infinilist.sequence.infinite_list import InfiniteList

__all__ = ["InfiniteList"]
