"""
Feedback simulation for a single (guess, answer) pair.

Conventions (pattern strings):
  - 'G'  : LetterStatus.CORRECT   = correct letter in the correct position
  - 'Y'  : LetterStatus.MISPLACED = correct letter in the wrong position
  - '-'  : LetterStatus.UNUSED    = letter not present (or present fewer times than guessed)

Algorithm (two-pass, canonical for Wordle):
  1) Count every letter of the answer. First pass marks exact matches and
     consumes one count per match.
  2) Second pass walks left to right and marks Misplaced only while the
     letter still has remaining count, so earlier positions claim the
     credit first when the guess repeats a letter more often than the answer.

The same function is used to filter candidates and by engines that want to
produce real feedback, so the two can never disagree.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from .types import Feedback, LetterStatus

_BY_SYMBOL = {s.symbol: s for s in LetterStatus}


def simulate_feedback(guess: str, answer: str) -> Feedback:
    """
    Feedback the game would give for `guess` if the hidden word were `answer`.

    Examples:
      to_pattern(simulate_feedback("belle", "level")) -> "-GYYY"
      to_pattern(simulate_feedback("sassy", "assay")) -> "YYG-G"
    """
    if len(guess) != len(answer):
        raise ValueError(f"Guess and answer must be the same length: {guess!r} vs {answer!r}")

    n = len(guess)
    statuses = [LetterStatus.UNUSED] * n
    remaining = Counter(answer)

    # Pass 1: exact matches.
    for i in range(n):
        if guess[i] == answer[i]:
            statuses[i] = LetterStatus.CORRECT
            remaining[guess[i]] -= 1

    # Pass 2: misplaced letters, leftmost first.
    for i in range(n):
        if statuses[i] is LetterStatus.CORRECT:
            continue
        g = guess[i]
        if remaining[g] > 0:
            statuses[i] = LetterStatus.MISPLACED
            remaining[g] -= 1

    return tuple(statuses)


def to_pattern(feedback: Iterable[LetterStatus]) -> str:
    """Feedback -> 'GY--G' style string."""
    return "".join(s.symbol for s in feedback)


def from_pattern(pattern: str) -> Feedback:
    """'GY--G' style string -> Feedback. Unknown symbols raise ValueError."""
    try:
        return tuple(_BY_SYMBOL[ch] for ch in pattern.strip().upper())
    except KeyError as e:
        raise ValueError(f"Invalid feedback symbol {e.args[0]!r} in pattern {pattern!r}") from e


def score(guess: str, answer: str) -> str:
    """
    Pattern-string form of simulate_feedback, normalized to lowercase input.

    Examples:
      score("belle", "level") -> "-GYYY"
      score("lemon", "level") -> "GG---"
    """
    return to_pattern(simulate_feedback(guess.strip().lower(), answer.strip().lower()))
