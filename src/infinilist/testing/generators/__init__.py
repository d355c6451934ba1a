"""Testing generators – hypothesis strategies and list builders."""
from infinilist.testing.generators.strategies import finite_list_strategy, from_sequence, maybe_strategy

__all__ = ["finite_list_strategy", "from_sequence", "maybe_strategy"]
