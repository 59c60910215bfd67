"""
Binary search over an ascending-sorted random-access sequence.
"""

from typing import Any, Optional, Sequence


def binary_search(sequence: Sequence[Any], value: Any) -> Optional[int]:
    """
    Find an index holding ``value``.

    With duplicates any matching index may be returned, not necessarily the
    first or last.

    Args:
        sequence: Ascending-sorted sequence, possibly empty
        value: Target to look for

    Returns:
        Index of an element equal to ``value``, or None if absent
    """
    lo = 0
    hi = len(sequence) - 1

    while lo <= hi:
        mid = (lo + hi) // 2
        focused = sequence[mid]
        if focused == value:
            return mid
        if focused < value:
            lo = mid + 1
        else:
            hi = mid - 1
    return None
