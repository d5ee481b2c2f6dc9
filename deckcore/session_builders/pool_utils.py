"""
Pool utilities for session builders.

These helpers provide shared, minimal primitives for building candidate
pools without enforcing a single selection policy.
"""

from __future__ import annotations
import random
from typing import Callable, Iterable, Optional, TypeVar


T = TypeVar("T")


def take(items: Iterable[T], limit: int) -> list[T]:
    """
    Take at most `limit` items, preserving order.
    """
    if limit <= 0:
        return []
    taken: list[T] = []
    for item in items:
        if len(taken) >= limit:
            break
        taken.append(item)
    return taken


def union_by_key(pools: list[list[T]], key: Callable[[T], object]) -> list[T]:
    """
    Concatenate pools, keeping the first occurrence of each key.
    """
    seen: set = set()
    combined: list[T] = []
    for pool in pools:
        for item in pool:
            k = key(item)
            if k in seen:
                continue
            seen.add(k)
            combined.append(item)
    return combined


def shuffled(items: list[T], rng: Optional[random.Random] = None) -> list[T]:
    """
    Return a shuffled copy; presentation order only.
    """
    result = list(items)
    (rng or random).shuffle(result)
    return result
