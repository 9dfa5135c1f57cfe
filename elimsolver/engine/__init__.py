from .types import WORD_LENGTH, LetterStatus, Feedback, GuessResult, INITIAL_RESULT
from .scoring import simulate_feedback, score, to_pattern, from_pattern
from .constraints import check_compatibility, filter_candidates
from .validation import validate_guess

__all__ = [
    "WORD_LENGTH", "LetterStatus", "Feedback", "GuessResult", "INITIAL_RESULT",
    "simulate_feedback", "score", "to_pattern", "from_pattern",
    "check_compatibility", "filter_candidates", "validate_guess",
]
