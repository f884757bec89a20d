"""Comparison engine: rank changes between two placings."""

from top7.models import Comparison, ComparisonEntry, Placing


def diff(previous: Placing, current: Placing) -> Comparison:
    """Compare the current placing against the previous one.

    Each song in `current` gets the number of places it moved up since
    `previous` (negative when it dropped), or a "new" entry if it was not
    placed before. Entries follow the order of `current`.
    """
    previous_ranks = {song: rank for rank, song in enumerate(previous, start=1)}

    result: Comparison = []
    for rank, song in enumerate(current, start=1):
        if song not in previous_ranks:
            result.append(ComparisonEntry(song=song, delta=None))
        else:
            result.append(ComparisonEntry(song=song, delta=previous_ranks[song] - rank))

    return result
