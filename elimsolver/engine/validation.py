"""
Lightweight guess validation.

A guess is valid iff:
  - it is a string
  - it is alphabetic a–z only
  - it has exact length n
  - it exists in the provided `allowed` words

Engines use this to fill GuessResult.is_valid before handing the result
back to a solver.
"""

from typing import Iterable, Set

from .types import WORD_LENGTH


def validate_guess(word: str, allowed: Iterable[str], n: int = WORD_LENGTH) -> bool:
    """
    Return True if `word` is a valid guess per the rules above.

    Notes:
      - Pass a set (e.g. Dictionary.lookup) for `allowed` when calling in a loop;
        anything else is copied into a local set on every call.
    """
    if not isinstance(word, str):
        return False

    w = word.strip().lower()

    if len(w) != n or not w.isalpha():
        return False

    if isinstance(allowed, (set, frozenset)):
        return w in allowed
    allowed_set: Set[str] = {a.strip().lower() for a in allowed}
    return w in allowed_set
