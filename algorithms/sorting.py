"""Classic comparison sorts operating in place on a list.

Every function takes an optional ``comp(a, b)`` returning whether ``a``
must come before ``b``; the default is ``operator.lt``.
"""

from __future__ import annotations

import argparse
import operator
import random
from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")
Less = Callable[[Any, Any], bool]


def insert_sort(items: list[T], comp: Less = operator.lt) -> None:
    """Straight insertion sort."""
    for i in range(len(items)):
        tmp = items[i]
        j = i - 1
        while j >= 0 and comp(tmp, items[j]):
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = tmp


def binary_insert_sort(items: list[T], comp: Less = operator.lt) -> None:
    """Insertion sort that finds each insertion point by binary search."""
    for i in range(len(items)):
        tmp = items[i]
        lo, hi = 0, i - 1
        while lo <= hi:
            mid = (lo + hi + 1) // 2
            if comp(items[mid], tmp):
                lo = mid + 1
            else:
                hi = mid - 1
        items[lo + 1 : i + 1] = items[lo:i]
        items[lo] = tmp


def shell_sort(items: list[T], comp: Less = operator.lt) -> None:
    """Shell sort with gaps n/2, n/4, ..., 1."""
    n = len(items)
    gap = n // 2
    while gap:
        for i in range(0, n, gap):
            tmp = items[i]
            j = i - gap
            while j >= 0 and comp(tmp, items[j]):
                items[j + gap] = items[j]
                j -= gap
            items[j + gap] = tmp
        gap //= 2


def select_sort(items: list[T], comp: Less = operator.lt) -> None:
    """Selection sort."""
    n = len(items)
    for i in range(n):
        k = i
        for j in range(i + 1, n):
            if comp(items[j], items[k]):
                k = j
        if k != i:
            items[i], items[k] = items[k], items[i]


def bubble_sort(items: list[T], comp: Less = operator.lt) -> None:
    """Bubble sort, stopping early once a pass makes no swap."""
    n = len(items)
    for i in range(n):
        swapped = False
        for j in range(n - 1, i, -1):
            if comp(items[j], items[j - 1]):
                items[j], items[j - 1] = items[j - 1], items[j]
                swapped = True
        if not swapped:
            return


def quick_sort(items: list[T], comp: Less = operator.lt) -> None:
    """Quicksort with Hoare partitioning around the middle element."""
    pending = [(0, len(items) - 1)]
    while pending:
        lo, hi = pending.pop()
        if lo >= hi:
            continue
        pivot = items[(lo + hi) // 2]
        i, j = lo - 1, hi + 1
        while i < j:
            i += 1
            while comp(items[i], pivot):
                i += 1
            j -= 1
            while comp(pivot, items[j]):
                j -= 1
            if i < j:
                items[i], items[j] = items[j], items[i]
        pending.append((lo, j))
        pending.append((j + 1, hi))


def _sift_down(items: list[T], size: int, root: int, comp: Less) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and comp(items[largest], items[left]):
            largest = left
        if right < size and comp(items[largest], items[right]):
            largest = right
        if largest == root:
            return
        items[largest], items[root] = items[root], items[largest]
        root = largest


def heap_sort(items: list[T], comp: Less = operator.lt) -> None:
    """Heap sort using a max-heap with respect to ``comp``."""
    n = len(items)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(items, n, i, comp)
    for end in range(n - 1, -1, -1):
        items[end], items[0] = items[0], items[end]
        _sift_down(items, end, 0, comp)


def _merge_sorted(items: list[T], comp: Less) -> list[T]:
    if len(items) <= 1:
        return list(items)
    mid = (len(items) + 1) // 2
    left = _merge_sorted(items[:mid], comp)
    right = _merge_sorted(items[mid:], comp)
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if comp(left[i], right[j]):
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: list[T], comp: Less = operator.lt) -> None:
    """Top-down merge sort."""
    items[:] = _merge_sorted(items, comp)


def _show(label: str, items: list[int]) -> None:
    print(f"{label}:")
    print(" ".join(map(str, items)))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sort a random array every way.")
    parser.add_argument("--size", type=int, default=20, help="number of values")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    if args.size < 0:
        parser.error("size must not be negative")

    rng = random.Random(args.seed)
    original = [rng.randint(0, 100) for _ in range(args.size)]
    _show("original array", original)

    values = list(original)
    shell_sort(values)
    _show("shell sorted array", values)
    shell_sort(values, operator.gt)
    _show("shell sorted array(large to small)", values)

    for name, sorter in [
        ("insert", insert_sort),
        ("binary insert", binary_insert_sort),
        ("select", select_sort),
        ("bubble", bubble_sort),
        ("quick", quick_sort),
        ("heap", heap_sort),
        ("merge", merge_sort),
    ]:
        values = list(original)
        sorter(values)
        _show(f"{name} sorted array", values)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())