"""Tests for the placing engine."""

import random

from top7.models import ContestRules
from top7.placing import select_top


def reference_top(tally: dict[int, int], size: int = 7) -> list[int]:
    """Full-sort reference implementation."""
    ranked = sorted(
        (song for song, weight in tally.items() if weight > 0),
        key=lambda song: (-tally[song], song),
    )
    return ranked[:size]


class TestSelectTop:
    def test_ties_broken_by_lower_id(self):
        """Weights 7,5,4,3,3,1,1,1: 1 beats 4, 3 and 5 beat 7 which is cut."""
        tally = {1: 3, 2: 5, 3: 1, 4: 3, 5: 1, 6: 7, 7: 1, 8: 4}
        assert select_top(tally) == [6, 2, 8, 1, 4, 3, 5]

    def test_empty_tally(self):
        assert select_top({}) == []

    def test_zero_weights_excluded(self):
        assert select_top({1: 0, 2: 3, 3: 0, 4: 1}) == [2, 4]

    def test_all_zero(self):
        assert select_top({1: 0, 2: 0}) == []

    def test_fewer_than_seven(self):
        assert select_top({5: 2, 3: 2, 9: 4}) == [9, 3, 5]

    def test_all_tied(self):
        tally = {song: 1 for song in range(20, 0, -1)}
        assert select_top(tally) == [1, 2, 3, 4, 5, 6, 7]

    def test_challenger_must_strictly_win(self):
        """A later song equal in weight but with a higher id does not get in."""
        tally = {song: 2 for song in range(1, 8)}
        tally[8] = 2
        tally[100] = 3
        assert select_top(tally) == [100, 1, 2, 3, 4, 5, 6]

    def test_custom_size(self):
        assert select_top({1: 1, 2: 2, 3: 3}, size=2) == [3, 2]

    def test_does_not_mutate_input(self):
        tally = {1: 0, 2: 3}
        select_top(tally)
        assert tally == {1: 0, 2: 3}

    def test_matches_full_sort(self):
        rng = random.Random(20260201)
        for _ in range(50):
            tally = {
                song: rng.randint(0, 6)
                for song in rng.sample(range(1, 500), rng.randint(0, 60))
            }
            assert select_top(tally) == reference_top(tally)

    def test_output_is_bounded_positive_and_descending(self):
        rng = random.Random(7)
        tally = {song: rng.randint(0, 3) for song in range(1, 200)}
        placing = select_top(tally)
        assert len(placing) <= 7
        assert all(tally[song] > 0 for song in placing)
        keys = [(-tally[song], song) for song in placing]
        assert keys == sorted(keys)
        assert len(set(keys)) == len(keys)

    def test_reselecting_induced_tally_reproduces_placing(self):
        placing = select_top({1: 3, 2: 5, 3: 1, 4: 3, 5: 1, 6: 7, 7: 1, 8: 4})
        induced = {song: 7 - i for i, song in enumerate(placing)}
        assert select_top(induced) == placing

    def test_default_size_follows_rules(self):
        tally = {song: 1 for song in range(1, 20)}
        assert len(select_top(tally)) == ContestRules().placing_size
