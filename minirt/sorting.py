"""Heap sort over integer sequences."""

from __future__ import annotations

from typing import Callable, Iterable, List


def _sift_down(
    heap: List[int], size: int, index: int, before: Callable[[int, int], bool]
) -> None:
    while True:
        chosen = index
        left = 2 * index + 1
        right = left + 1
        if left < size and before(heap[left], heap[chosen]):
            chosen = left
        if right < size and before(heap[right], heap[chosen]):
            chosen = right
        if chosen == index:
            return
        heap[index], heap[chosen] = heap[chosen], heap[index]
        index = chosen


def heap_sort(values: Iterable[int], ascending: bool = True) -> List[int]:
    """Return the values heap-sorted, ascending or descending.

    A max-heap yields ascending order and a min-heap descending order.
    """
    heap = list(values)
    size = len(heap)
    if ascending:
        before: Callable[[int, int], bool] = lambda a, b: a > b
    else:
        before = lambda a, b: a < b
    for index in reversed(range(size // 2)):
        _sift_down(heap, size, index, before)
    for end in range(size - 1, 0, -1):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, end, 0, before)
    return heap