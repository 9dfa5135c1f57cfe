"""
Candidate filtering given game history.

A candidate survives a (guess, feedback) pair iff scoring the guess against
that candidate reproduces the observed feedback exactly. Solvers use this
to keep the candidate set consistent with everything seen so far.
"""

from typing import Iterable, List, Sequence, Tuple

from .scoring import simulate_feedback
from .types import Feedback, LetterStatus

# History is a sequence of (guess, feedback) tuples produced by the engine.
History = Iterable[Tuple[str, Feedback]]


def check_compatibility(candidate: str, guess: str, observed: Sequence[LetterStatus]) -> bool:
    """
    True iff `candidate`, were it the answer, would have produced `observed`
    for `guess` (element-wise equality over the whole sequence).
    """
    return simulate_feedback(guess, candidate) == tuple(observed)


def filter_candidates(words: Iterable[str], history: History) -> List[str]:
    """
    Keep only words that reproduce the recorded feedback for every
    (guess, feedback) in `history`.

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
    """
    history = list(history)
    out: List[str] = []

    for w in words:
        if all(check_compatibility(w, g, fb) for g, fb in history):
            out.append(w)

    return out
