"""In-place sorting algorithms and a sortedness check."""

from __future__ import annotations

import random
from bisect import bisect_right
from itertools import pairwise
from typing import Any, MutableSequence, Sequence


def insertion_sort(data: MutableSequence[Any]) -> None:
    """Sort ``data`` in place with straight insertion sort."""
    for i in range(1, len(data)):
        key = data[i]
        j = i - 1
        while j >= 0 and data[j] > key:
            data[j + 1] = data[j]
            j -= 1
        data[j + 1] = key


def binary_insertion_sort(data: MutableSequence[Any]) -> None:
    """Sort ``data`` in place, finding each insertion point by binary search."""
    for i in range(1, len(data)):
        key = data[i]
        position = bisect_right(data, key, 0, i)
        if position < i:
            data[position + 1 : i + 1] = data[position:i]
            data[position] = key


def _max_heapify(data: MutableSequence[Any], index: int, heap_size: int) -> None:
    while True:
        largest = index
        left = 2 * index + 1
        right = left + 1
        if left < heap_size and data[left] > data[largest]:
            largest = left
        if right < heap_size and data[right] > data[largest]:
            largest = right
        if largest == index:
            return
        data[index], data[largest] = data[largest], data[index]
        index = largest


def heap_sort(data: MutableSequence[Any]) -> None:
    """Sort ``data`` in place with heap sort on a max-heap."""
    n = len(data)
    for i in range(n // 2 - 1, -1, -1):
        _max_heapify(data, i, n)
    for end in range(n - 1, 0, -1):
        data[0], data[end] = data[end], data[0]
        _max_heapify(data, 0, end)


def _partition(data: MutableSequence[Any], low: int, high: int) -> int:
    pivot_index = random.randint(low, high)
    data[pivot_index], data[high] = data[high], data[pivot_index]
    pivot = data[high]
    boundary = low - 1
    for j in range(low, high):
        if data[j] <= pivot:
            boundary += 1
            data[boundary], data[j] = data[j], data[boundary]
    data[boundary + 1], data[high] = data[high], data[boundary + 1]
    return boundary + 1


def quick_sort(data: MutableSequence[Any]) -> None:
    """Sort ``data`` in place with quick sort using a random pivot."""
    pending = [(0, len(data) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = _partition(data, low, high)
        pending.append((low, pivot - 1))
        pending.append((pivot + 1, high))


def is_sorted(data: Sequence[Any]) -> bool:
    """True when no element is greater than the one after it."""
    return not any(left > right for left, right in pairwise(data))