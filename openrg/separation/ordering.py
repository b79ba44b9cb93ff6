"""
Ordering utilities shared by the separation oracles.

This module provides:
- less: Default strict comparator for violation measures
- has_measure: Presence test for optional violation measures (max policy)
- identity: Default reorder transform (scan candidates as produced)
- rotate: Left rotation of a finite candidate sequence
- RandomRotate: Reorder transform that rotates by a random offset
"""

import random
from typing import Any, Iterable, List, Optional, TypeVar

T = TypeVar('T')


def less(a: Any, b: Any) -> bool:
    """Default comparator: strict less-than."""
    return a < b


def has_measure(measure: Any) -> bool:
    """
    Check whether an optional violation measure is present.

    None means "not violated". Any other value, including a measure of 0,
    takes part in the comparison.
    """
    return measure is not None


def identity(candidates: Iterable[T]) -> Iterable[T]:
    """Default reorder transform: returns the candidates untouched."""
    return candidates


def rotate(candidates: Iterable[T], offset: int) -> List[T]:
    """
    Left-rotate a finite candidate sequence.

    The element at position ``offset`` becomes the first one. Offsets are
    taken modulo the length, so 0 and len(candidates) are both no-ops.

    Args:
        candidates: Finite sequence or iterable (materialised first)
        offset: Rotation offset

    Returns:
        A new list with the rotated order
    """
    items = candidates if isinstance(candidates, list) else list(candidates)
    if not items:
        return []
    offset %= len(items)
    return items[offset:] + items[:offset]


class RandomRotate:
    """
    Reorder transform rotating the candidates by a uniform random offset.

    Each call draws an integer in [0, len] (both ends inclusive) from the
    owned generator and left-rotates by it. The generator is advanced on
    every call, so successive calls consume one stream rather than
    independent fresh draws.

    Args:
        rng: Object with a ``randint(a, b)`` method, typically random.Random

    Example:
        >>> shuffle = RandomRotate(random.Random(7))
        >>> order = shuffle([0, 1, 2, 3, 4])
        >>> shuffle.last_offset in range(6)
        True
    """

    def __init__(self, rng: random.Random):
        self._rng = rng
        self.last_offset: Optional[int] = None

    @property
    def rng(self) -> random.Random:
        """The owned random generator."""
        return self._rng

    def __call__(self, candidates: Iterable[T]) -> List[T]:
        items = candidates if isinstance(candidates, list) else list(candidates)
        offset = self._rng.randint(0, len(items))
        self.last_offset = offset
        return rotate(items, offset)

    def __repr__(self) -> str:
        return f"RandomRotate(last_offset={self.last_offset})"


def make_random_rotate(rng: Optional[random.Random] = None) -> RandomRotate:
    """
    Build a RandomRotate transform.

    Args:
        rng: Generator to own. Defaults to random.Random seeded from
            openrg.config.config.seed, or from the platform when unset.

    Returns:
        RandomRotate instance
    """
    if rng is None:
        from openrg.config import config
        rng = random.Random(config.seed)
    return RandomRotate(rng)
