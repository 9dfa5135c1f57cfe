"""
Value types shared by the engine and the solvers.

  LetterStatus : per-position outcome of a guess (Correct/Misplaced/Unused)
  Feedback     : tuple of N LetterStatus values, aligned with the guess
  GuessResult  : one submitted guess + its feedback + turn number
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

# Single source of truth for the word length.
WORD_LENGTH = 5


class LetterStatus(Enum):
    CORRECT = "G"    # right letter, right slot (green)
    MISPLACED = "Y"  # letter present elsewhere (yellow)
    UNUSED = "-"     # absent, or all copies already claimed (gray)

    @property
    def symbol(self) -> str:
        return self.value


Feedback = Tuple[LetterStatus, ...]


@dataclass(frozen=True)
class GuessResult:
    """
    Outcome of one submitted guess, as reported by the game engine.

    `turn` counts from 1 for real guesses; turn 0 is reserved for the
    start-of-game sentinel (see INITIAL_RESULT).
    """
    word: str = ""
    feedback: Feedback = ()
    turn: int = 0
    is_valid: bool = False

    @property
    def is_initial(self) -> bool:
        return self.turn == 0

    @property
    def solved(self) -> bool:
        return bool(self.feedback) and all(s is LetterStatus.CORRECT for s in self.feedback)

    @classmethod
    def from_pattern(cls, word: str, pattern: str, turn: int) -> "GuessResult":
        """Build a valid result from a 'GY--G' style pattern string."""
        from .scoring import from_pattern
        return cls(word=word.strip().lower(), feedback=from_pattern(pattern),
                   turn=turn, is_valid=True)


# Start-of-game marker handed to next_guess() before any guess is made.
INITIAL_RESULT = GuessResult()
