"""
Generic set algebra used by the similarity measures.

Every operation returns a new set and leaves its inputs untouched.
"""
from __future__ import annotations

from collections.abc import Hashable
from collections.abc import Set as AbstractSet
from typing import TypeVar

E = TypeVar("E", bound=Hashable)


def union(s: AbstractSet[E], t: AbstractSet[E]) -> set[E]:
    """Return a new set with every element of s or t."""
    result = set(s)
    result.update(t)
    return result


def intersection(s: AbstractSet[E], t: AbstractSet[E]) -> set[E]:
    """Return a new set with the elements present in both s and t."""
    if not s or not t:
        return set()
    # Scan the smaller side, probe the larger one
    small, large = (s, t) if len(s) <= len(t) else (t, s)
    return {e for e in small if e in large}


def set_difference(s: AbstractSet[E], t: AbstractSet[E]) -> set[E]:
    """Return s \\ t. Elements of t that are not in s are ignored."""
    return {e for e in s if e not in t}


def jaccard_index(s: AbstractSet[E], t: AbstractSet[E]) -> float:
    """
    Jaccard index of two sets.

    Defined as 1.0 when both sets are empty, otherwise
    |s ∩ t| / |s ∪ t|. The result is 1.0 exactly when the sets hold the
    same elements and 0.0 exactly when they are disjoint.

    Args:
        s: First set
        t: Second set

    Returns:
        Similarity in [0.0, 1.0]
    """
    if not s and not t:
        return 1.0
    shared = len(intersection(s, t))
    # |s ∪ t| = |s| + |t| - |s ∩ t|
    return shared / (len(s) + len(t) - shared)
