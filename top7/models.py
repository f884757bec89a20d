"""Core data models for tallies, placings and comparisons."""

from dataclasses import dataclass, field
from typing import Any

SongId = int
Tally = dict[SongId, int]  # song_id -> votes or points
Placing = list[SongId]


@dataclass(frozen=True)
class ContestRules:
    """Tunable constants of a contest.

    Attributes:
        placing_size: Number of songs in a placing (also the points for 1st)
        max_roster_bound: Highest roster bound a NEW instruction may declare
        new_marker: Printed instead of a delta for songs new to a placing
        new_keyword: Keyword that closes a round and extends the roster
        standings_keyword: Keyword that reports the standings
    """
    placing_size: int = 7
    max_roster_bound: int = 99_999_999
    new_marker: str = "-"
    new_keyword: str = "NEW"
    standings_keyword: str = "TOP"

    def points_for(self, position: int) -> int:
        """Points awarded for a 0-indexed placing position."""
        return self.placing_size - position


@dataclass
class ComparisonEntry:
    """A song's movement between two placings.

    Attributes:
        song: Song identifier
        delta: Previous rank minus current rank (positive = moved up),
               or None if the song was not in the previous placing
    """
    song: SongId
    delta: int | None

    @property
    def is_new(self) -> bool:
        return self.delta is None

    def format(self, new_marker: str = "-") -> str:
        if self.delta is None:
            return f"{self.song} {new_marker}"
        return f"{self.song} {self.delta}"

    def to_dict(self) -> dict[str, Any]:
        return {"song": self.song, "delta": self.delta, "new": self.is_new}


Comparison = list[ComparisonEntry]


@dataclass
class Report:
    """A comparison emitted by a round closure or a standings report.

    Attributes:
        kind: "round" or "standings"
        line_number: 1-indexed input line that produced the report
        comparison: Entries in placing order
    """
    kind: str
    line_number: int
    comparison: Comparison = field(default_factory=list)

    def lines(self, new_marker: str = "-") -> list[str]:
        return [entry.format(new_marker) for entry in self.comparison]

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "line": self.line_number,
            "entries": [entry.to_dict() for entry in self.comparison],
        }
