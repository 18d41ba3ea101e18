from __future__ import annotations

from typing import Dict, List

from pydantic import Field

from .common import JSONDict, ResultModel


class Metrics(ResultModel):
    """Error and accuracy measures of one prediction run."""

    problem: str
    n_rows: int
    measures: Dict[str, float] = Field(default_factory=dict)

    def __getitem__(self, name: str) -> float:
        return self.measures[name]


class ResampleResult(ResultModel):
    """Fixed learner evaluated under a resampling strategy."""

    learner: str
    measure: str
    assignment: JSONDict = Field(default_factory=dict)
    n_folds: int
    n_repeats: int
    fold_metrics: List[Metrics] = Field(default_factory=list)
    aggregate: Dict[str, float] = Field(default_factory=dict)
    std: Dict[str, float] = Field(default_factory=dict)

    @property
    def mean_error(self) -> float:
        return self.aggregate[self.measure]
