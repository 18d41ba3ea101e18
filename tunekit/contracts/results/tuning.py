from __future__ import annotations

from typing import List

from pydantic import Field

from .common import JSONDict, ResultModel


class CandidateEvaluation(ResultModel):
    """One evaluated assignment and its resampled validation error."""

    index: int
    assignment: JSONDict = Field(default_factory=dict)
    mean_error: float
    std_error: float
    fold_errors: List[float] = Field(default_factory=list)


class SearchResult(ResultModel):
    strategy: str
    measure: str
    n_candidates: int

    best_index: int
    best_assignment: JSONDict = Field(default_factory=dict)
    best_error: float

    trace: List[CandidateEvaluation] = Field(default_factory=list)

    def errors(self) -> List[float]:
        """Mean errors in evaluation order (handy for plotting a tuning curve)."""
        return [c.mean_error for c in self.trace]
