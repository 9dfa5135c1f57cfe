"""
Exception taxonomy for elimsolver.

Every failure here is a broken contract, not a transient condition:
the solver is pure and deterministic, so retrying reproduces the error.

  - ContractViolation     : caller advanced a turn after an invalid guess
  - InconsistentState     : feedback history eliminated every candidate
  - DictionaryLoadFailure : word list missing or empty at startup
"""

from __future__ import annotations


class SolverError(Exception):
    """Base class for all elimsolver errors."""


class ContractViolation(SolverError, RuntimeError):
    """next_guess() called with an invalid previous result (turn > 0)."""


class InconsistentState(SolverError, RuntimeError):
    """No dictionary word is compatible with the observed feedback."""

    def __init__(self, message: str, result=None):
        super().__init__(message)
        self.result = result


class DictionaryLoadFailure(SolverError, FileNotFoundError):
    """The word list could not be read or produced no usable words."""
