from __future__ import annotations

from typing import Dict, Iterable, List, Tuple, Type

from elimsolver.datasets.io import Dictionary
from elimsolver.engine.types import GuessResult

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    Caller contract shared by all strategies:

        solver.reset()                       # once per game
        guess = solver.next_guess(INITIAL_RESULT)
        while not solved:
            result = engine.submit(guess)    # GuessResult
            guess = solver.next_guess(result)

    The dictionary is shared and never mutated; the candidate list is
    private to the instance.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, dictionary: Iterable[str]):
        # materialize once so every reset() sees the full word list
        if not isinstance(dictionary, (Dictionary, tuple)):
            dictionary = tuple(dictionary)
        self.dictionary = dictionary
        self._candidates: List[str] = []
        self.reset()

    @property
    def candidates(self) -> Tuple[str, ...]:
        """Snapshot of the words still consistent with all feedback."""
        return tuple(self._candidates)

    def reset(self) -> None:
        self._candidates = list(self.dictionary)

    def next_guess(self, previous: GuessResult) -> str:
        raise NotImplementedError("Override in subclass")
