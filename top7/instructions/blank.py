"""Blank lines are ignored."""

import re

from top7.instructions import register_instruction
from top7.instructions.base import Instruction, InstructionKind


@register_instruction
class BlankInstruction(Instruction):
    PRIORITY = 40

    @property
    def kind(self) -> InstructionKind:
        return InstructionKind.BLANK

    def build_pattern(self) -> re.Pattern:
        return re.compile(r"\s*", re.ASCII)
