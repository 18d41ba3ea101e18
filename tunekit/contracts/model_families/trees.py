from __future__ import annotations

from typing import ClassVar, Literal, Optional, Union

from pydantic import BaseModel

from ..choices import (
    ForestClassWeight,
    GBLoss,
    GBRegLoss,
    MaxFeaturesName,
    RegTreeCriterion,
    TreeCriterion,
)


class ForestConfig(BaseModel):
    algo: Literal["forest"] = "forest"

    task: ClassVar[str] = "classification"
    family: ClassVar[str] = "trees"

    n_estimators: int = 100
    criterion: TreeCriterion = "gini"
    max_depth: Optional[int] = None
    min_samples_split: int = 2
    min_samples_leaf: int = 1
    min_weight_fraction_leaf: float = 0.0
    max_features: Union[int, float, MaxFeaturesName] = "sqrt"
    max_leaf_nodes: Optional[int] = None
    min_impurity_decrease: float = 0.0
    bootstrap: bool = True
    oob_score: bool = False
    n_jobs: Optional[int] = None
    random_state: Optional[int] = None
    class_weight: ForestClassWeight = None
    ccp_alpha: float = 0.0
    max_samples: Optional[Union[int, float]] = None


class RandomForestRegressorConfig(BaseModel):
    algo: Literal["rfreg"] = "rfreg"

    task: ClassVar[str] = "regression"
    family: ClassVar[str] = "trees"

    n_estimators: int = 100
    criterion: RegTreeCriterion = "squared_error"
    max_depth: Optional[int] = None
    min_samples_split: int = 2
    min_samples_leaf: int = 1
    min_weight_fraction_leaf: float = 0.0
    max_features: Union[int, float, MaxFeaturesName] = 1.0
    max_leaf_nodes: Optional[int] = None
    min_impurity_decrease: float = 0.0
    bootstrap: bool = True
    oob_score: bool = False
    n_jobs: Optional[int] = None
    random_state: Optional[int] = None
    ccp_alpha: float = 0.0
    max_samples: Optional[Union[int, float]] = None


class GradientBoostingConfig(BaseModel):
    algo: Literal["gboost"] = "gboost"

    task: ClassVar[str] = "classification"
    family: ClassVar[str] = "trees"

    loss: GBLoss = "log_loss"
    learning_rate: float = 0.1
    n_estimators: int = 100
    subsample: float = 1.0
    min_samples_split: int = 2
    min_samples_leaf: int = 1
    max_depth: Optional[int] = 3
    max_features: Optional[Union[int, float, MaxFeaturesName]] = None
    random_state: Optional[int] = None
    validation_fraction: float = 0.1
    n_iter_no_change: Optional[int] = None
    tol: float = 1e-4


class GradientBoostingRegressorConfig(BaseModel):
    algo: Literal["gboostreg"] = "gboostreg"

    task: ClassVar[str] = "regression"
    family: ClassVar[str] = "trees"

    loss: GBRegLoss = "squared_error"
    learning_rate: float = 0.1
    n_estimators: int = 100
    subsample: float = 1.0
    min_samples_split: int = 2
    min_samples_leaf: int = 1
    max_depth: Optional[int] = 3
    max_features: Optional[Union[int, float, MaxFeaturesName]] = None
    alpha: float = 0.9
    random_state: Optional[int] = None
    validation_fraction: float = 0.1
    n_iter_no_change: Optional[int] = None
    tol: float = 1e-4
