from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field

from .common import JSONDict, ResultModel
from .evaluation import Metrics


class BenchmarkRow(ResultModel):
    """Outer-fold performance of one self-tuning learner."""

    learner_id: str
    algo: str
    fold_scores: List[Optional[float]] = Field(default_factory=list)
    fold_metrics: List[Optional[Metrics]] = Field(default_factory=list)
    best_assignments: List[Optional[JSONDict]] = Field(default_factory=list)
    aggregate: Dict[str, float] = Field(default_factory=dict)
    std: Dict[str, float] = Field(default_factory=dict)

    # Filled when the learner failed to produce a finite score on some fold.
    error: Optional[str] = None
    error_type: Optional[str] = None
    failed_folds: List[int] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None


class BenchmarkReport(ResultModel):
    task_id: str
    measure: str
    n_outer_folds: int
    rows: Dict[str, BenchmarkRow] = Field(default_factory=dict)

    def to_frame(self) -> Any:
        """Performance table: one row per learner, one column per aggregated measure."""
        import pandas as pd

        records = []
        for learner_id, row in self.rows.items():
            rec: Dict[str, Any] = {"learner_id": learner_id, "algo": row.algo}
            for name, value in row.aggregate.items():
                rec[f"{name}.test.mean"] = value
            rec["error"] = row.error
            records.append(rec)
        if not records:
            return pd.DataFrame(columns=["algo", "error"]).rename_axis("learner_id")
        return pd.DataFrame.from_records(records).set_index("learner_id")
