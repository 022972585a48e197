"""The sorting strategies: bubble, chunk, radix and the adaptive choice between them."""

from __future__ import annotations

import math
from collections import deque
from typing import Callable, Iterable

from pushswap.analysis import assign_indices, disorder, position
from pushswap.stacks import Element, Stacks


def bubble_sort(stacks: Stacks) -> None:
    """Sort stack a with swaps and rotations only, one full lap per pass."""
    swapped = True
    while swapped:
        swapped = False
        for _ in range(len(stacks.a) - 1):
            if stacks.a[0].value > stacks.a[1].value:
                stacks.swap_a()
                swapped = True
            stacks.rotate_a()
        stacks.rotate_a()


def chunk_size(stacks: Stacks) -> int:
    """Integer square root of the size of stack a."""
    return math.isqrt(len(stacks.a))


def in_range(elements: Iterable[Element], low: int, high: int) -> int | None:
    """Index of the first element whose index lies in [low, high], or None."""
    for element in elements:
        if low <= element.index <= high:
            return element.index
    return None


def _bring_to_top(
    stack: deque[Element],
    index: int,
    rotate: Callable[[], None],
    reverse_rotate: Callable[[], None],
) -> None:
    place = position(stack, index)
    if place is None:
        raise ValueError(f"no element with index {index}")
    size = len(stack)
    if place <= size - place:
        for _ in range(place - 1):
            rotate()
    else:
        for _ in range(size - place + 1):
            reverse_rotate()


def bring_to_top_a(stacks: Stacks, index: int) -> None:
    """Rotate stack a the shorter way until the element with ``index`` is on top."""
    _bring_to_top(stacks.a, index, stacks.rotate_a, stacks.reverse_rotate_a)


def bring_to_top_b(stacks: Stacks, index: int) -> None:
    """Rotate stack b the shorter way until the element with ``index`` is on top."""
    _bring_to_top(stacks.b, index, stacks.rotate_b, stacks.reverse_rotate_b)


def sort_and_push(stacks: Stacks) -> None:
    """Move all of b onto a, largest index first, so a ends smallest on top."""
    for _ in range(len(stacks.b)):
        largest = max(stacks.b, key=lambda e: e.index)
        bring_to_top_b(stacks, largest.index)
        stacks.push_a()


def chunk_sort(stacks: Stacks) -> None:
    """Push a to b in chunks of rank, then pull back the largest each time."""
    size = chunk_size(stacks)
    low, high = 1, size
    assign_indices(stacks.a)
    for _ in range(size + 1):
        while (index := in_range(stacks.a, low, high)) is not None:
            bring_to_top_a(stacks, index)
            stacks.push_b()
        low += size
        high += size
    sort_and_push(stacks)


def bit_count(elements: Iterable[Element]) -> int:
    """Number of binary digits in the largest index."""
    return max((e.index for e in elements), default=0).bit_length()


def radix_sort(stacks: Stacks) -> None:
    """Binary LSD radix sort on the ranks, using b as the zero bucket."""
    assign_indices(stacks.a)
    for bit in range(bit_count(stacks.a)):
        for _ in range(len(stacks.a)):
            if (stacks.a[0].index >> bit) & 1 == 0:
                stacks.push_b()
            else:
                stacks.rotate_a()
        while stacks.b:
            stacks.push_a()


def adaptive(stacks: Stacks) -> None:
    """Choose a strategy by how disordered stack a is."""
    dis = disorder(stacks.values_a())
    if dis < 0.2:
        bubble_sort(stacks)
    elif dis < 0.5:
        chunk_sort(stacks)
    else:
        radix_sort(stacks)