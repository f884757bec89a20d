"""Abstract base class for input line instructions."""

import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from top7.models import ContestRules


class InstructionKind(Enum):
    NEW_ROUND = "new_round"
    STANDINGS = "standings"
    VOTE = "vote"
    BLANK = "blank"


class InstructionError(ValueError):
    """Raised when a line matches an instruction but its payload is invalid."""
    pass


class Instruction(ABC):
    """Abstract base class for one kind of input line.

    Each instruction recognises its lines with a whole-line regex and turns
    them into a payload for the contest. Instructions are registered via the
    @register_instruction decorator in top7/instructions/__init__.py and
    tried in ascending PRIORITY order.
    """

    PRIORITY: int = 100

    def __init__(self, rules: ContestRules | None = None):
        self.rules = rules or ContestRules()
        self.pattern = self.build_pattern()

    @property
    @abstractmethod
    def kind(self) -> InstructionKind:
        """Which contest operation this instruction maps to."""
        pass

    @abstractmethod
    def build_pattern(self) -> re.Pattern:
        """Compile the regex a whole line must match."""
        pass

    def matches(self, line: str) -> bool:
        return self.pattern.fullmatch(line) is not None

    def parse(self, line: str) -> Any:
        """Extract the payload from a matching line.

        Args:
            line: Input line, already known to match this instruction

        Returns:
            Instruction-specific payload (None if there is none)

        Raises:
            InstructionError: If the payload is malformed or out of range
        """
        return None
