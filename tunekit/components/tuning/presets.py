from __future__ import annotations

"""Ready-made search spaces for the bundled learners.

These mirror the spaces used when comparing tuned kNN, random forests and
boosting on the wine and Boston-style tasks; all of them go through
``define_search_space`` and are safe to pass straight to ``tune``. The
forest and boosting spaces are too large for an exhaustive default grid.
"""

from typing import Tuple

from tunekit.contracts.search_space import CategoricalParam, ContinuousParam, IntegerParam, SearchSpace

from .space import define_search_space


def knn_grid(max_k: int = 12) -> SearchSpace:
    """``n_neighbors`` over ``1..max_k``."""
    return define_search_space([IntegerParam(name="n_neighbors", lower=1, upper=max_k)])


def forest_space(n_features: int, ntree: Tuple[int, int] = (50, 500)) -> SearchSpace:
    """``max_features`` (mtry) over ``1..n_features`` and ``n_estimators`` over ``ntree``.

    ``ntree=(50, 50)`` pins the ensemble size. The full grid is
    ``n_features * (hi - lo + 1)`` candidates, so search it with
    ``RandomizedSearchConfig`` or a coarse ``GridSearchConfig(resolution=...)``.
    """
    lo, hi = ntree
    return define_search_space(
        [
            IntegerParam(name="max_features", lower=1, upper=n_features),
            IntegerParam(name="n_estimators", lower=lo, upper=hi),
        ]
    )


def boosting_space() -> SearchSpace:
    """``n_estimators``, log-scaled ``learning_rate`` and ``max_depth``.

    Meant for ``RandomizedSearchConfig`` or a coarse ``GridSearchConfig(resolution=...)``;
    the default grid has over 20,000 candidates.
    """
    return define_search_space(
        [
            IntegerParam(name="n_estimators", lower=50, upper=500),
            ContinuousParam(name="learning_rate", lower=0.01, upper=0.3, log=True),
            IntegerParam(name="max_depth", lower=1, upper=5),
        ]
    )


def discriminant_space() -> SearchSpace:
    """QDA covariance regularization."""
    return define_search_space([ContinuousParam(name="reg_param", lower=0.0, upper=1.0)])


def lda_solver_space() -> SearchSpace:
    return define_search_space([CategoricalParam(name="solver", values=("svd", "lsqr", "eigen"))])


__all__ = ["knn_grid", "forest_space", "boosting_space", "discriminant_space", "lda_solver_space"]
