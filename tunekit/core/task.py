from __future__ import annotations

"""Task: a dataset bundled with its prediction target and problem kind.

Conventions
-----------
- Every column except ``target`` is a feature; the target never enters X.
- Feature columns must be numeric and complete (data is assumed pre-cleaned).
- Tasks are read-only: the frame is copied on construction and ``subset``
  returns a new Task.
"""

from dataclasses import dataclass
from typing import Any, List, Sequence

import numpy as np
import pandas as pd

from tunekit.contracts.choices import ProblemKind


@dataclass(frozen=True, eq=False)
class Task:
    data: pd.DataFrame
    target: str
    problem: ProblemKind
    id: str = "task"

    def __post_init__(self) -> None:
        if not isinstance(self.data, pd.DataFrame):
            raise TypeError(f"Task data must be a pandas DataFrame; got {type(self.data).__name__}")
        if self.problem not in ("classification", "regression"):
            raise ValueError(f"Unknown problem kind: {self.problem!r}")
        if self.target not in self.data.columns:
            raise ValueError(f"Target column {self.target!r} not found in data columns")
        if self.data.shape[0] == 0:
            raise ValueError("Task data has no rows")

        features = [str(c) for c in self.data.columns if c != self.target]
        if not features:
            raise ValueError("Task data has no feature columns besides the target")

        non_numeric = [c for c in features if not pd.api.types.is_numeric_dtype(self.data[c])]
        if non_numeric:
            raise ValueError(f"Feature columns must be numeric; non-numeric: {non_numeric}")
        if self.data.isna().to_numpy().any():
            raise ValueError("Task data contains missing values; clean the data first")

        frame = self.data.copy()
        frame.columns = [str(c) for c in frame.columns]
        object.__setattr__(self, "data", frame)

    # ------------------------------------------------------------------

    @property
    def feature_names(self) -> List[str]:
        return [str(c) for c in self.data.columns if c != self.target]

    @property
    def n_rows(self) -> int:
        return int(self.data.shape[0])

    @property
    def X(self) -> np.ndarray:
        return self.data[self.feature_names].to_numpy(dtype=float)

    @property
    def y(self) -> np.ndarray:
        y = self.data[self.target].to_numpy()
        if self.problem == "regression":
            return y.astype(float)
        return y

    @property
    def classes(self) -> List[Any]:
        if self.problem != "classification":
            return []
        return np.unique(self.y).tolist()

    def subset(self, indices: Sequence[int], *, suffix: str = "subset") -> "Task":
        """Return a new Task over the selected row positions."""
        idx = np.asarray(indices, dtype=int)
        frame = self.data.iloc[idx].reset_index(drop=True)
        return Task(data=frame, target=self.target, problem=self.problem, id=f"{self.id}/{suffix}")


__all__ = ["Task"]
