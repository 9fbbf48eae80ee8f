"""
Bounded min-heap selection of the largest items.

``top_k`` walks its input once, keeping at most ``k`` items on a
min-heap keyed by ``key``.  Whenever the heap grows past ``k`` its
smallest item is evicted.  The survivors are returned largest first.
Time is O(n log k) and auxiliary space O(k).

Ties: heap entries are ``(key, arrival, item)`` so items are never
compared directly.  Among equal keys the earliest arrival is evicted
first, and equal keys in the output keep arrival order.  That is a
property of this heap, not a contract; callers must not rely on which
of several equally ranked items survives at the ``k``-th place.
"""

import heapq
from itertools import count
from typing import Callable, Iterable, List, Tuple, TypeVar

T = TypeVar("T")


def top_k(items: Iterable[T], k: int, key: Callable[[T], int]) -> List[T]:
    """Return the ``k`` items with the largest ``key``, in descending order.

    Parameters
    ----------
    items : Iterable
        Items in retrieval order.
    k : int
        Heap capacity.  ``k <= 0`` selects nothing.
    key : Callable
        Ranking key, e.g. ``lambda e: e.salary``.

    Returns
    -------
    List
        At most ``k`` items sorted by ``key`` descending.
    """
    if k <= 0:
        return []

    heap: List[Tuple[int, int, T]] = []
    arrival = count()
    for item in items:
        heapq.heappush(heap, (key(item), next(arrival), item))
        if len(heap) > k:
            heapq.heappop(heap)

    retained = [heapq.heappop(heap) for _ in range(len(heap))]
    # Popped ascending by (key, arrival); sort by key only so that equal
    # keys keep arrival order.
    retained.sort(key=lambda entry: entry[0], reverse=True)
    return [entry[2] for entry in retained]
