from __future__ import annotations

"""Literal-based "choice" types used across contracts.

This module centralizes the small enumerations (TypeAlias + Literal) that are
shared across multiple contract modules.

Design intent:
- Keep this file dependency-free (stdlib + typing only).
- Prefer importing choice sets from here rather than repeating Literal[...] in
  multiple contract files.
"""

from typing import Literal, TypeAlias, Union


# -----------------------------
# Common / high-level
# -----------------------------

ProblemKind: TypeAlias = Literal["classification", "regression"]


# -----------------------------
# Search space
# -----------------------------

# Values a categorical hyperparameter may take.
CategoricalValue: TypeAlias = Union[int, float, str, bool, None]


# -----------------------------
# Search strategies / resampling
# -----------------------------

SearchKind: TypeAlias = Literal["grid_search", "random_search"]
SplitMode: TypeAlias = Literal["holdout", "kfold", "repeated_kfold"]


# -----------------------------
# Measures (losses, lower is better)
# -----------------------------

RegressionMeasure: TypeAlias = Literal["mse", "rmse", "mae"]
ClassificationMeasure: TypeAlias = Literal["mmce", "ber"]

MeasureName: TypeAlias = Union[RegressionMeasure, ClassificationMeasure]


# -----------------------------
# Trees / Forests / Boosting
# -----------------------------

TreeCriterion: TypeAlias = Literal["gini", "entropy", "log_loss"]
RegTreeCriterion: TypeAlias = Literal[
    "squared_error",
    "friedman_mse",
    "absolute_error",
    "poisson",
]
MaxFeaturesName: TypeAlias = Literal["sqrt", "log2"]  # (int|float|None are also allowed at runtime)
ForestClassWeight: TypeAlias = Union[Literal["balanced", "balanced_subsample"], None]

GBLoss: TypeAlias = Literal["log_loss", "exponential"]
GBRegLoss: TypeAlias = Literal["squared_error", "absolute_error", "huber", "quantile"]


# -----------------------------
# Discriminant analysis
# -----------------------------

LDASolver: TypeAlias = Literal["svd", "lsqr", "eigen"]


# -----------------------------
# KNN helpers
# -----------------------------

KNNWeights: TypeAlias = Literal["uniform", "distance"]
KNNAlgorithm: TypeAlias = Literal["auto", "ball_tree", "kd_tree", "brute"]
KNNMetric: TypeAlias = Literal["minkowski", "euclidean", "manhattan", "chebyshev"]


__all__ = [
    "ProblemKind",
    "CategoricalValue",
    "SearchKind",
    "SplitMode",
    "RegressionMeasure",
    "ClassificationMeasure",
    "MeasureName",
    "TreeCriterion",
    "RegTreeCriterion",
    "MaxFeaturesName",
    "ForestClassWeight",
    "GBLoss",
    "GBRegLoss",
    "LDASolver",
    "KNNWeights",
    "KNNAlgorithm",
    "KNNMetric",
]
