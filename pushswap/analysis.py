"""Measures of how far a sequence is from sorted, and rank bookkeeping."""

from __future__ import annotations

from itertools import combinations
from typing import Iterable

from pushswap.stacks import Element


def disorder(values: Iterable[int]) -> float:
    """Share of ordered pairs that are inverted: 0.0 when sorted, 1.0 when reversed.

    A sequence with fewer than two values has no pairs and counts as sorted.
    """
    pairs = 0
    inverted = 0
    for first, second in combinations(list(values), 2):
        pairs += 1
        if first > second:
            inverted += 1
    if pairs == 0:
        return 0.0
    return inverted / pairs


def assign_indices(elements: Iterable[Element]) -> None:
    """Give each element its rank by value, starting at 1 for the smallest."""
    for rank, element in enumerate(sorted(elements, key=lambda e: e.value), start=1):
        element.index = rank


def position(elements: Iterable[Element], index: int) -> int | None:
    """1-based position of the element holding ``index``, or None if there is none."""
    for place, element in enumerate(elements, start=1):
        if element.index == index:
            return place
    return None