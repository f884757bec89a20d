"""Round controller: the contest state machine."""

from collections.abc import Iterable

from top7.comparison import diff
from top7.models import Comparison, ContestRules, Placing, SongId, Tally
from top7.placing import select_top


class ContestError(ValueError):
    """Raised when an instruction breaks the contest rules.

    The contest state is left untouched when this is raised.
    """
    pass


class Contest:
    """State of a running contest.

    A round is closed (and the roster extended) by `close_round`, votes
    for the open round are added with `cast_votes`, and `report_standings`
    ranks songs by the points they collected over all closed rounds.

    Two elimination rules apply:
    - A song that was placed in the previous round but not in the round
      just closed can no longer be voted for.
    - A song that drops out of the standings placing and can no longer be
      voted for is removed from the standings, since it cannot gain the
      points to climb back in.

    Attributes:
        rules: Contest constants (placing size, roster ceiling, ...)
        votes: Vote tally of the open round, keyed by eligible song id
        standings: Accumulated placement points per song
        roster_bound: Highest song id declared so far
        round_placing: Placing of the last closed round
        standings_placing: Placing of the last standings report
        rounds_closed: Number of rounds closed so far
    """

    def __init__(self, rules: ContestRules | None = None):
        self.rules = rules or ContestRules()
        self.votes: Tally = {}
        self.standings: Tally = {}
        self.roster_bound = 0
        self.round_placing: Placing = []
        self.standings_placing: Placing = []
        self.rounds_closed = 0

    def is_eligible(self, song: SongId) -> bool:
        """Whether votes for this song are accepted in the open round."""
        return song in self.votes

    def cast_votes(self, songs: Iterable[SongId]) -> None:
        """Add one vote to each listed song.

        The whole instruction is rejected if any song is ineligible or
        listed twice.

        Raises:
            ContestError: If the votes are invalid (tally unchanged)
        """
        seen: set[SongId] = set()
        for song in songs:
            if not self.is_eligible(song):
                raise ContestError(f"Song {song} is not eligible for voting")
            if song in seen:
                raise ContestError(f"Song {song} voted for more than once")
            seen.add(song)

        for song in seen:
            self.votes[song] += 1

    def close_round(self, new_bound: int) -> Comparison:
        """Close the open round and extend the roster up to `new_bound`.

        Returns:
            Comparison of this round's placing against the previous round's.

        Raises:
            ContestError: If `new_bound` is below the current roster bound
                or outside 1..rules.max_roster_bound (state unchanged)
        """
        if new_bound < self.roster_bound:
            raise ContestError(
                f"Roster bound cannot shrink from {self.roster_bound} to {new_bound}"
            )
        if not 1 <= new_bound <= self.rules.max_roster_bound:
            raise ContestError(
                f"Roster bound must be between 1 and {self.rules.max_roster_bound}"
            )

        previous = self.round_placing
        self.round_placing = select_top(self.votes, self.rules.placing_size)
        result = diff(previous, self.round_placing)

        for position, song in enumerate(self.round_placing):
            self.standings[song] = self.standings.get(song, 0) + self.rules.points_for(position)

        placed = set(self.round_placing)
        eliminated = [song for song in previous if song not in placed]

        # Prepare the next round
        for song in range(self.roster_bound + 1, new_bound + 1):
            self.votes[song] = 0
        for song in eliminated:
            self.votes.pop(song, None)
        for song in self.votes:
            self.votes[song] = 0

        self.roster_bound = new_bound
        self.rounds_closed += 1
        return result

    def report_standings(self) -> Comparison:
        """Rank songs by accumulated points.

        Returns:
            Comparison of the standings placing against the last reported one.
        """
        previous = self.standings_placing
        self.standings_placing = select_top(self.standings, self.rules.placing_size)
        result = diff(previous, self.standings_placing)

        placed = set(self.standings_placing)
        for song in previous:
            if song not in placed and song not in self.votes:
                self.standings.pop(song, None)

        return result
