"""Configuration and result contracts.

This package contains Pydantic models and Literal-based choice types used to
validate configuration payloads across tunekit.

Export policy:
- Keep module imports explicit in most of the codebase:
    from tunekit.contracts.split_configs import SplitCVModel
- The names re-exported here are a small set of convenience imports for
  callers that prefer a single namespace.
"""

from .choices import MeasureName, ProblemKind, SearchKind, SplitMode
from .model_configs import (
    ForestConfig,
    GradientBoostingConfig,
    GradientBoostingRegressorConfig,
    KNNConfig,
    KNNRegressorConfig,
    LDAConfig,
    ModelConfig,
    QDAConfig,
    RandomForestRegressorConfig,
)
from .search_space import (
    CategoricalParam,
    ContinuousParam,
    HyperparameterSpec,
    IntegerParam,
    SearchSpace,
)
from .split_configs import SplitConfig, SplitCVModel, SplitHoldoutModel, SplitRepeatedCVModel
from .tuning_configs import GridSearchConfig, RandomizedSearchConfig, SearchConfig
from .eval_configs import EvalModel
from .benchmark_configs import TunedLearner

__all__ = [
    # choice types
    "MeasureName",
    "ProblemKind",
    "SearchKind",
    "SplitMode",
    # learners
    "ModelConfig",
    "KNNConfig",
    "KNNRegressorConfig",
    "ForestConfig",
    "RandomForestRegressorConfig",
    "GradientBoostingConfig",
    "GradientBoostingRegressorConfig",
    "LDAConfig",
    "QDAConfig",
    # search space
    "IntegerParam",
    "ContinuousParam",
    "CategoricalParam",
    "HyperparameterSpec",
    "SearchSpace",
    # resampling / search / eval
    "SplitConfig",
    "SplitHoldoutModel",
    "SplitCVModel",
    "SplitRepeatedCVModel",
    "SearchConfig",
    "GridSearchConfig",
    "RandomizedSearchConfig",
    "EvalModel",
    # benchmark
    "TunedLearner",
]
