from enum import Enum
from typing import Any


class OrderingPolicy(Enum):
    """Which end of the order sits at the top of a heap.

    The only behavior is ``dominates``: whether a parent may sit above a
    child. It is reflexive, so equal keys never need a swap.
    """

    MIN_ON_TOP = "min"
    MAX_ON_TOP = "max"

    def dominates(self, parent: Any, child: Any) -> bool:
        if self is OrderingPolicy.MIN_ON_TOP:
            return parent <= child
        return parent >= child

    def __repr__(self) -> str:
        return self.name
