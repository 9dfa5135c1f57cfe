from __future__ import annotations
from typing import Iterable, List
from .base import BaseSolver, REGISTRY, register

from .letter_freq import LetterFreqSolver, select_best_candidate  # registers


def create_solver(solver_id: str, dictionary: Iterable[str], **kwargs) -> BaseSolver:
    """
    Factory: instantiate a registered solver by id.
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(dictionary, **kwargs)


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable help output).
    """
    return sorted(REGISTRY.keys())
