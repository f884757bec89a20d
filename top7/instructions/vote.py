"""Vote lines: whitespace-separated song ids."""

import re

from top7.instructions import register_instruction
from top7.instructions.base import Instruction, InstructionKind


@register_instruction
class VoteInstruction(Instruction):
    """One voter's ballot: one or more song ids, e.g. "3 1 7".

    Each token may carry leading zeros but has at most 9 significant
    digits. Eligibility and duplicates are checked by the contest, which
    knows the current roster.
    """

    PRIORITY = 30

    TOKEN = r"0*\d{1,9}"

    @property
    def kind(self) -> InstructionKind:
        return InstructionKind.VOTE

    def build_pattern(self) -> re.Pattern:
        return re.compile(rf"\s*(?:{self.TOKEN}\s+)*{self.TOKEN}\s*", re.ASCII)

    def parse(self, line: str) -> list[int]:
        return [int(token) for token in line.split()]
