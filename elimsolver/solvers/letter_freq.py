"""
Letter-Frequency Solver (distinct-letter coverage).

Idea:
  - After every guess, drop each candidate that would not have produced the
    observed feedback had it been the answer.
  - Count, for each letter, how many remaining candidates contain it at
    least once. Score each candidate as the sum of those counts over its
    DISTINCT letters and guess the best one.

Notes:
  - Counts are per word, not per occurrence: "geese" adds 1 to 'e', not 3.
  - Ties go to the candidate that comes first in dictionary order, so a
    game is fully reproducible.
  - The opener is fixed; it does not depend on the dictionary.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Callable, Iterable, Sequence

from elimsolver.engine.constraints import check_compatibility
from elimsolver.engine.scoring import to_pattern
from elimsolver.engine.types import GuessResult
from elimsolver.errors import ContractViolation, InconsistentState
from .base import BaseSolver, register

log = logging.getLogger(__name__)

Scorer = Callable[[Sequence[str]], str]


def letter_document_counts(words: Iterable[str]) -> Counter:
    """letter -> number of words containing it at least once."""
    counts: Counter = Counter()
    for w in words:
        counts.update(set(w))
    return counts


def score_word(w: str, counts: Counter) -> int:
    """
    Sum letter counts but count each letter at most once per word
    (prefer 'slate' over 'sleet' when counts are similar).
    """
    return sum(counts[ch] for ch in set(w))


def select_best_candidate(candidates: Sequence[str]) -> str:
    """
    Highest-scoring candidate; the first one in list order wins ties.
    """
    if not candidates:
        raise ValueError("select_best_candidate() needs at least one candidate")

    counts = letter_document_counts(candidates)

    best_word = candidates[0]
    best_score = -1
    for w in candidates:
        s = score_word(w, counts)
        # strict '>' keeps the earliest word on ties
        if s > best_score:
            best_score = s
            best_word = w
    return best_word


@register
class LetterFreqSolver(BaseSolver):
    id = "letter_freq"
    name = "Letter Frequency (distinct)"
    version = "2.0.0"

    # Five distinct common letters, four of them vowels.
    OPENER = "audio"

    def __init__(self, dictionary: Iterable[str], *, scorer: Scorer = select_best_candidate):
        super().__init__(dictionary)
        self.scorer = scorer

    def next_guess(self, previous: GuessResult) -> str:
        """
        Narrow the candidates with `previous` and pick the next guess.

        Raises:
            ContractViolation: previous guess was invalid (outside turn 0).
            InconsistentState: no candidate fits the feedback history.
        """
        if not previous.is_valid and previous.turn > 0:
            raise ContractViolation(
                "next_guess() should not be called after an invalid guess, "
                f"unless it's the start of the game (turn={previous.turn}, word={previous.word!r})")

        if previous.is_initial:
            return self.OPENER

        before = len(self._candidates)
        # filter in place; the list never grows
        self._candidates[:] = [
            w for w in self._candidates
            if check_compatibility(w, previous.word, previous.feedback)
        ]
        log.debug("turn %d: %s %s -> %d/%d candidates", previous.turn, previous.word,
                  to_pattern(previous.feedback), len(self._candidates), before)

        if not self._candidates:
            raise InconsistentState(
                f"No remaining words after filtering on {previous.word!r} "
                f"{to_pattern(previous.feedback)!r} (turn {previous.turn})",
                result=previous,
            )

        # Only one word left: it must be the answer.
        if len(self._candidates) == 1:
            return self._candidates[0]

        return self.scorer(self._candidates)
