from __future__ import annotations
from dataclasses import dataclass
from typing import Dict

import numpy as np

from tunekit.components.interfaces import Evaluator
from tunekit.components.evaluation.metrics import all_measures, loss as loss_fn


@dataclass(frozen=True)
class SklearnEvaluator(Evaluator):
    """
    Scores predictions with sklearn metrics.
    - ``loss`` returns the configured measure (what tuning minimizes).
    - ``measures`` returns every measure of the problem kind (what gets reported).
    """
    kind: str
    measure: str

    def loss(self, y_true: np.ndarray, y_pred: np.ndarray) -> float:
        return loss_fn(y_true, y_pred, kind=self.kind, measure=self.measure)

    def measures(self, y_true: np.ndarray, y_pred: np.ndarray) -> Dict[str, float]:
        return all_measures(y_true, y_pred, kind=self.kind)
