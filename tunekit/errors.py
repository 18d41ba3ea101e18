"""Exception taxonomy for tuning, resampling and benchmarking.

These are intentionally lightweight so they can be raised from compute paths
without importing contracts or sklearn. Every error keeps enough context
(parameter name, fold index, candidate assignment) to reproduce the failure.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence


class TunekitError(RuntimeError):
    """Base class for all library errors."""


class InvalidDomainError(TunekitError):
    """Raised when a hyperparameter domain is malformed (inverted bounds, empty values)."""

    def __init__(self, message: str, param_name: Optional[str] = None):
        super().__init__(message)
        self.param_name = param_name


class EmptySearchSpaceError(TunekitError):
    """Raised when a search strategy produces no candidate assignments."""


class ResamplingFailureError(TunekitError):
    """Raised when a resampling fold cannot be fit or scored."""

    def __init__(
        self,
        message: str,
        fold_index: Optional[int] = None,
        repetition: Optional[int] = None,
        assignment: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.fold_index = fold_index
        self.repetition = repetition
        self.assignment = dict(assignment) if assignment is not None else None


class SchemaMismatchError(TunekitError):
    """Raised when evaluation rows disagree with the training schema."""

    def __init__(
        self,
        message: str,
        missing: Sequence[str] = (),
        unexpected: Sequence[str] = (),
    ):
        super().__init__(message)
        self.missing = list(missing)
        self.unexpected = list(unexpected)


class LearnerDivergenceError(TunekitError):
    """A wrapped learner failed to produce a finite score on a benchmark fold."""

    def __init__(
        self,
        message: str,
        learner_id: Optional[str] = None,
        fold_index: Optional[int] = None,
    ):
        super().__init__(message)
        self.learner_id = learner_id
        self.fold_index = fold_index


__all__ = [
    "TunekitError",
    "InvalidDomainError",
    "EmptySearchSpaceError",
    "ResamplingFailureError",
    "SchemaMismatchError",
    "LearnerDivergenceError",
]
