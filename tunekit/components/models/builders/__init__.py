"""Model estimator builders.

Builder classes convert typed learner configs into concrete sklearn
estimators.

Public API remains stable:
    from tunekit.components.models.builders import KNNBuilder, ...
"""

from .classification import (
    KNNBuilder,
    RandomForestBuilder,
    GradientBoostingBuilder,
    LDABuilder,
    QDABuilder,
)

from .regression import (
    KNNRegressorBuilder,
    RandomForestRegressorBuilder,
    GradientBoostingRegressorBuilder,
)

__all__ = [
    "KNNBuilder",
    "RandomForestBuilder",
    "GradientBoostingBuilder",
    "LDABuilder",
    "QDABuilder",
    "KNNRegressorBuilder",
    "RandomForestRegressorBuilder",
    "GradientBoostingRegressorBuilder",
]
