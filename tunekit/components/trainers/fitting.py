from __future__ import annotations

from typing import Any, Optional

import numpy as np
from sklearn.metrics import mean_squared_error

from tunekit.core.sklearn_utils import unwrap_final_estimator


def fit_model(model: Any, X_train: np.ndarray, y_train: np.ndarray) -> Any:
    """
    Fit a scikit-learn–style estimator on training data.

    Parameters
    ----------
    model : Any
        Estimator exposing `fit(X, y)`.
    X_train : array-like of shape (n_samples, n_features)
    y_train : array-like of shape (n_samples,)

    Returns
    -------
    model : Any
        The same estimator, after fitting (standard sklearn behavior).

    Raises
    ------
    AttributeError
        If `model` does not have a `fit` method.
    ValueError
        If input shapes are inconsistent.
    """
    if not hasattr(model, "fit"):
        raise AttributeError("`model` has no `.fit(...)` method.")

    X_train = np.asarray(X_train)
    y_train = np.asarray(y_train).ravel()

    if X_train.ndim != 2:
        raise ValueError(f"X_train must be 2D; got {X_train.shape}.")
    if X_train.shape[0] != y_train.shape[0]:
        raise ValueError(
            f"X_train and y_train length mismatch: {X_train.shape[0]} vs {y_train.shape[0]}."
        )

    model.fit(X_train, y_train)
    return model


def oob_error(model: Any, y_train: np.ndarray, *, kind: str) -> Optional[float]:
    """
    Out-of-bag error of a fitted bagging ensemble, or None when unavailable.

    Classification reports the misclassification rate, regression the mean
    squared error of the OOB predictions.
    """
    est = unwrap_final_estimator(model)
    if not getattr(est, "oob_score", False) or not hasattr(est, "oob_score_"):
        return None
    if kind == "classification":
        return float(1.0 - est.oob_score_)
    oob_pred = getattr(est, "oob_prediction_", None)
    if oob_pred is None:
        return None
    return float(mean_squared_error(np.asarray(y_train).ravel(), np.asarray(oob_pred).ravel()))


__all__ = ["fit_model", "oob_error"]
