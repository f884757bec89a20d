"""Shared test helpers."""

from top7.contest import Contest
from top7.models import Comparison
from top7.run import ContestRun, run_contest


def make_contest(bound: int, votes: dict[int, int] | None = None) -> Contest:
    """Build a Contest with an open round covering songs 1..bound.

    Args:
        bound: Roster bound; songs 1..bound start with zero votes
        votes: Optional {song_id: votes} to pre-load into the open round
    """
    contest = Contest()
    contest.close_round(bound)
    for song, count in (votes or {}).items():
        contest.votes[song] = count
    return contest


def run_lines(text: str, contest: Contest | None = None) -> ContestRun:
    """Run a contest over a multi-line string, one instruction per line."""
    return run_contest(text.splitlines(), contest)


def pairs(comparison: Comparison) -> list[tuple[int, int | None]]:
    """Flatten a comparison into (song, delta) tuples."""
    return [(entry.song, entry.delta) for entry in comparison]
