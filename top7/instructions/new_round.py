"""NEW <n>: close the round and extend the roster."""

import re

from top7.instructions import register_instruction
from top7.instructions.base import Instruction, InstructionError, InstructionKind


@register_instruction
class NewRoundInstruction(Instruction):
    """Close the open round and raise the roster bound.

    Format: the NEW keyword followed by the new roster bound, e.g. "NEW 12".
    Only the range is checked here; whether the bound may be lowered is
    up to the contest.
    """

    PRIORITY = 10

    @property
    def kind(self) -> InstructionKind:
        return InstructionKind.NEW_ROUND

    def build_pattern(self) -> re.Pattern:
        return re.compile(
            rf"\s*{re.escape(self.rules.new_keyword)}\s+(\d+)\s*", re.ASCII
        )

    def parse(self, line: str) -> int:
        bound = int(self.pattern.fullmatch(line).group(1))
        if not 1 <= bound <= self.rules.max_roster_bound:
            raise InstructionError(
                f"Roster bound {bound} is outside 1..{self.rules.max_roster_bound}"
            )
        return bound
