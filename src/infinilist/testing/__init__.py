"""Testing support – hypothesis strategies for Maybe and InfiniteList."""

from infinilist.testing.generators import finite_list_strategy, from_sequence, maybe_strategy

__all__ = ["finite_list_strategy", "from_sequence", "maybe_strategy"]
