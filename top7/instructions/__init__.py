"""Line instructions understood by the contest."""

from top7.models import ContestRules

from .base import Instruction, InstructionError, InstructionKind

# Instruction registry - import instruction modules to register them
_instructions: list[type[Instruction]] = []


def register_instruction(instruction_class: type[Instruction]) -> type[Instruction]:
    """Decorator to register an instruction class."""
    _instructions.append(instruction_class)
    return instruction_class


def get_all_instructions(rules: ContestRules | None = None) -> list[Instruction]:
    """Return instances of all registered instructions, highest priority first."""
    ordered = sorted(_instructions, key=lambda cls: cls.PRIORITY)
    return [instruction_class(rules) for instruction_class in ordered]


def classify_line(line: str, instructions: list[Instruction]) -> Instruction | None:
    """Return the first instruction whose grammar matches the whole line."""
    for instruction in instructions:
        if instruction.matches(line):
            return instruction
    return None


__all__ = [
    "Instruction",
    "InstructionError",
    "InstructionKind",
    "classify_line",
    "get_all_instructions",
    "register_instruction",
]
