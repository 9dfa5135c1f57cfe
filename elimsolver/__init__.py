from .errors import SolverError, ContractViolation, InconsistentState, DictionaryLoadFailure
from .engine import (
    LetterStatus, Feedback, GuessResult, INITIAL_RESULT,
    simulate_feedback, check_compatibility,
)
from .datasets import Dictionary, load_dictionary
from .solvers import BaseSolver, LetterFreqSolver, create_solver, get_solver_ids, select_best_candidate

__version__ = "0.1.0"

__all__ = [
    "SolverError", "ContractViolation", "InconsistentState", "DictionaryLoadFailure",
    "LetterStatus", "Feedback", "GuessResult", "INITIAL_RESULT",
    "simulate_feedback", "check_compatibility",
    "Dictionary", "load_dictionary",
    "BaseSolver", "LetterFreqSolver", "create_solver", "get_solver_ids", "select_best_candidate",
]
