"""
Uniform random choice over a candidate sequence.

Kept behind a small class so a heap can be handed a seeded or scripted
source instead of reaching for a global generator.
"""

from typing import Optional, Sequence, TypeVar

import numpy as np

T = TypeVar('T')


def choose_random(candidates: Sequence[T], rng: np.random.Generator) -> Optional[T]:
    """
    Pick one element of ``candidates`` with equal probability.

    Args:
        candidates: Finite sequence to choose from, possibly empty
        rng: Generator supplying the randomness

    Returns:
        The chosen element, or None when there are no candidates
    """
    if len(candidates) == 0:
        return None
    return candidates[int(rng.integers(len(candidates)))]


class RandomChoice:
    """Uniform chooser backed by a NumPy generator."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[np.random.Generator] = None):
        self._rng = rng if rng is not None else np.random.default_rng(seed)

    def choose(self, candidates: Sequence[T]) -> Optional[T]:
        return choose_random(candidates, self._rng)

    def __repr__(self) -> str:
        return f"RandomChoice({self._rng!r})"
