"""Orchestrator: classify input lines and feed them to the contest."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from top7.contest import Contest, ContestError
from top7.instructions import (
    InstructionError,
    InstructionKind,
    classify_line,
    get_all_instructions,
)
from top7.models import Comparison, Report

# Import instructions to register them
from top7.instructions import new_round  # noqa: F401
from top7.instructions import standings  # noqa: F401
from top7.instructions import vote  # noqa: F401
from top7.instructions import blank  # noqa: F401


@dataclass
class LineError:
    """An input line that was skipped.

    Attributes:
        line_number: 1-indexed position of the line in the input
        line: The offending text, without its trailing newline
        reason: Why the line was rejected (empty if it matched no instruction)
    """
    line_number: int
    line: str
    reason: str = ""

    @property
    def message(self) -> str:
        return f"Error in line {self.line_number}: {self.line}"

    def to_dict(self) -> dict[str, Any]:
        return {"line": self.line_number, "text": self.line, "reason": self.reason}


class UnhandledInstructionError(RuntimeError):
    """An instruction was classified as a kind that has no handler.

    This is a programming error, not bad input.
    """
    pass


@dataclass
class ContestRun:
    """Everything produced while processing an input stream."""
    contest: Contest
    reports: list[Report] = field(default_factory=list)
    errors: list[LineError] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "rounds_closed": self.contest.rounds_closed,
            "roster_bound": self.contest.roster_bound,
            "reports": [report.to_dict() for report in self.reports],
            "errors": [error.to_dict() for error in self.errors],
        }


def _handle_new_round(contest: Contest, payload: int) -> Comparison:
    return contest.close_round(payload)


def _handle_standings(contest: Contest, payload: None) -> Comparison:
    return contest.report_standings()


def _handle_vote(contest: Contest, payload: list[int]) -> None:
    contest.cast_votes(payload)


def _handle_blank(contest: Contest, payload: None) -> None:
    return None


HANDLERS: dict[InstructionKind, Callable[[Contest, Any], Comparison | None]] = {
    InstructionKind.NEW_ROUND: _handle_new_round,
    InstructionKind.STANDINGS: _handle_standings,
    InstructionKind.VOTE: _handle_vote,
    InstructionKind.BLANK: _handle_blank,
}

REPORT_KINDS = {
    InstructionKind.NEW_ROUND: "round",
    InstructionKind.STANDINGS: "standings",
}


def run_contest(
    lines: Iterable[str],
    contest: Contest | None = None,
    on_report: Callable[[Report], None] | None = None,
    on_error: Callable[[LineError], None] | None = None,
) -> ContestRun:
    """Process a stream of instruction lines in order.

    Bad lines are recorded and skipped; they never stop the run.

    Args:
        lines: Input lines (a trailing newline on each is ignored)
        contest: Contest to drive (a fresh one with default rules if None)
        on_report: Called with each report as soon as it is produced
        on_error: Called with each rejected line as soon as it is seen

    Returns:
        ContestRun with the final contest state, all reports and all errors

    Raises:
        UnhandledInstructionError: If an instruction kind has no handler
    """
    if contest is None:
        contest = Contest()
    run = ContestRun(contest=contest)
    instructions = get_all_instructions(contest.rules)

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.rstrip("\r\n")
        instruction = classify_line(line, instructions)

        if instruction is None:
            error = LineError(line_number, line)
        else:
            handler = HANDLERS.get(instruction.kind)
            if handler is None:
                raise UnhandledInstructionError(
                    f"No handler for instruction kind {instruction.kind!r}, "
                    f"line {line_number}: {line!r}"
                )

            try:
                comparison = handler(contest, instruction.parse(line))
            except (InstructionError, ContestError) as e:
                error = LineError(line_number, line, str(e))
            else:
                error = None
                if comparison is not None:
                    report = Report(
                        kind=REPORT_KINDS[instruction.kind],
                        line_number=line_number,
                        comparison=comparison,
                    )
                    run.reports.append(report)
                    if on_report is not None:
                        on_report(report)

        if error is not None:
            run.errors.append(error)
            if on_error is not None:
                on_error(error)

    return run
