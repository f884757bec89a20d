"""TOP: report the standings."""

import re

from top7.instructions import register_instruction
from top7.instructions.base import Instruction, InstructionKind


@register_instruction
class StandingsInstruction(Instruction):
    """Report the standings placing. The line holds only the keyword."""

    PRIORITY = 20

    @property
    def kind(self) -> InstructionKind:
        return InstructionKind.STANDINGS

    def build_pattern(self) -> re.Pattern:
        return re.compile(rf"\s*{re.escape(self.rules.standings_keyword)}\s*", re.ASCII)
