from __future__ import annotations

from typing import Callable, Dict, Literal, Optional

import numpy as np
from sklearn.metrics import (
    accuracy_score,
    balanced_accuracy_score,
    mean_absolute_error,
    mean_squared_error,
    r2_score,
)


def _as_1d(a: np.ndarray) -> np.ndarray:
    return np.asarray(a).ravel()


def _check_len(y_true: np.ndarray, other: np.ndarray, name: str) -> None:
    if y_true.shape[0] != other.shape[0]:
        raise ValueError(f"Length mismatch: y_true has {y_true.shape[0]} rows, {name} has {other.shape[0]}")


# Losses: lower is better. These are the measures a search may minimize.
_REG_LOSSES: Dict[str, Callable[[np.ndarray, np.ndarray], float]] = {
    "mse": lambda y, yhat: mean_squared_error(y, yhat),
    "rmse": lambda y, yhat: np.sqrt(mean_squared_error(y, yhat)),
    "mae": lambda y, yhat: mean_absolute_error(y, yhat),
}

_CLASS_LOSSES: Dict[str, Callable[[np.ndarray, np.ndarray], float]] = {
    "mmce": lambda y, yhat: 1.0 - accuracy_score(y, yhat),
    "ber": lambda y, yhat: 1.0 - balanced_accuracy_score(y, yhat),
}

# Reported alongside the losses but never minimized.
_REG_EXTRAS: Dict[str, Callable[[np.ndarray, np.ndarray], float]] = {
    "r2": lambda y, yhat: r2_score(y, yhat) if y.shape[0] > 1 else float("nan"),
}

_CLASS_EXTRAS: Dict[str, Callable[[np.ndarray, np.ndarray], float]] = {
    "accuracy": lambda y, yhat: accuracy_score(y, yhat),
}

DEFAULT_MEASURE = {"regression": "mse", "classification": "mmce"}


def losses_for(kind: str) -> Dict[str, Callable[[np.ndarray, np.ndarray], float]]:
    if kind == "regression":
        return _REG_LOSSES
    if kind == "classification":
        return _CLASS_LOSSES
    raise ValueError("kind must be one of {'classification','regression'}.")


def resolve_measure(kind: str, measure: Optional[str]) -> str:
    """Validate ``measure`` against the problem kind; None picks the default."""
    if measure is None:
        return DEFAULT_MEASURE[kind]
    supported = losses_for(kind)
    if measure not in supported:
        raise ValueError(
            f"Measure {measure!r} is not defined for {kind}. Supported: {sorted(supported)}"
        )
    return measure


def loss(
    y_true: np.ndarray,
    y_pred: np.ndarray,
    *,
    kind: Literal["classification", "regression"],
    measure: str,
) -> float:
    y_true = _as_1d(y_true)
    y_pred = _as_1d(y_pred)
    _check_len(y_true, y_pred, "y_pred")
    fn = losses_for(kind)[resolve_measure(kind, measure)]
    return float(fn(y_true, y_pred))


def all_measures(
    y_true: np.ndarray,
    y_pred: np.ndarray,
    *,
    kind: Literal["classification", "regression"],
) -> Dict[str, float]:
    """Every loss plus the reported extras (accuracy / r2) for ``kind``."""
    y_true = _as_1d(y_true)
    y_pred = _as_1d(y_pred)
    _check_len(y_true, y_pred, "y_pred")

    extras = _REG_EXTRAS if kind == "regression" else _CLASS_EXTRAS
    out: Dict[str, float] = {}
    for name, fn in {**losses_for(kind), **extras}.items():
        out[name] = float(fn(y_true, y_pred))
    return out
