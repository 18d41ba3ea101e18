from __future__ import annotations

from typing import Any

import numpy as np


def predict_labels(model: Any, X_test: np.ndarray) -> np.ndarray:
    """
    Predict with a fitted scikit-learn–style estimator.

    Returns class labels for classifiers and real values for regressors.

    Raises
    ------
    AttributeError
        If `model` does not have `.predict(...)`.
    ValueError
        If X_test is not 2D.
    """
    if not hasattr(model, "predict"):
        raise AttributeError("`model` has no `.predict(...)` method.")

    X_test = np.asarray(X_test)
    if X_test.ndim != 2:
        raise ValueError(f"X_test must be 2D; got {X_test.shape}.")

    return np.asarray(model.predict(X_test))
