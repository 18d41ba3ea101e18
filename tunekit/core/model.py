from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

import numpy as np

from .sklearn_utils import unwrap_final_estimator


@dataclass(frozen=True, eq=False)
class TrainedModel:
    """A learner fitted once with a fixed assignment.

    Owned by the caller and never refit; the only consumer is the prediction
    path, which checks incoming rows against ``feature_names``.
    """

    estimator: Any
    learner: Any
    task_id: str
    problem: str
    target: str
    feature_names: Tuple[str, ...]
    assignment: Dict[str, Any] = field(default_factory=dict)
    classes: Optional[Tuple[Any, ...]] = None
    n_train: int = 0
    oob_error: Optional[float] = None

    def predict(self, rows: Any) -> np.ndarray:
        """Predictions for rows carrying exactly the training features (a target column is ignored)."""
        from tunekit.components.prediction import align_rows, predict_labels

        X, _ = align_rows(rows, self.feature_names, target=self.target)
        return predict_labels(self.estimator, X)

    @property
    def algo(self) -> str:
        return str(getattr(self.learner, "algo", type(self.estimator).__name__))

    def feature_importances(self) -> Dict[str, float]:
        """Impurity-based importances (tree ensembles); empty for other learners."""
        est = unwrap_final_estimator(self.estimator)
        importances = getattr(est, "feature_importances_", None)
        if importances is None:
            return {}
        values = np.asarray(importances, dtype=float).ravel()
        return {name: float(v) for name, v in zip(self.feature_names, values)}


__all__ = ["TrainedModel"]
