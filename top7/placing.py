"""Placing engine: bounded top-K selection from a tally."""

import heapq

from top7.models import ContestRules, Placing, Tally

PLACING_SIZE = ContestRules().placing_size


def select_top(tally: Tally, size: int = PLACING_SIZE) -> Placing:
    """Select the best `size` songs from a tally.

    Songs are ordered by weight (highest first), with ties going to the
    lower song id. Songs with zero weight never place.

    The working set is a min-heap keyed on (weight, -song), so its root is
    always the weakest candidate kept so far. A challenger only displaces
    the root when it strictly beats it, which keeps the cost at
    O(n log size) without sorting the whole tally.

    Args:
        tally: Mapping of song id -> weight (votes or points)
        size: Maximum number of songs in the placing

    Returns:
        Song ids from 1st place down, at most `size` long.
    """
    heap: list[tuple[int, int]] = []

    for song, weight in tally.items():
        if weight == 0:
            continue

        key = (weight, -song)
        if len(heap) < size:
            heapq.heappush(heap, key)
        elif key > heap[0]:
            heapq.heapreplace(heap, key)

    return [-neg_song for _, neg_song in sorted(heap, reverse=True)]
