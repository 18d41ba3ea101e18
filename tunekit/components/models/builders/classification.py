from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from sklearn.discriminant_analysis import (
    LinearDiscriminantAnalysis,
    QuadraticDiscriminantAnalysis,
)
from sklearn.ensemble import GradientBoostingClassifier, RandomForestClassifier
from sklearn.neighbors import KNeighborsClassifier

from tunekit.contracts.model_configs import (
    ForestConfig,
    GradientBoostingConfig,
    KNNConfig,
    LDAConfig,
    QDAConfig,
)
from tunekit.components.interfaces import ModelBuilder

from .common import _filtered_kwargs, _maybe_set_random_state, _with_scaling


@dataclass
class KNNBuilder(ModelBuilder):
    cfg: KNNConfig

    def make_estimator(self) -> Any:
        kw = _filtered_kwargs(KNeighborsClassifier, self.cfg)
        return _with_scaling(KNeighborsClassifier(**kw), self.cfg.scale)


@dataclass
class RandomForestBuilder(ModelBuilder):
    cfg: ForestConfig
    seed: Optional[int] = None

    def make_estimator(self) -> Any:
        kw = _filtered_kwargs(RandomForestClassifier, self.cfg)
        _maybe_set_random_state(RandomForestClassifier, kw, self.seed)
        # sklearn rejects oob_score without bootstrap samples
        if not self.cfg.bootstrap:
            kw["oob_score"] = False
            kw.pop("max_samples", None)
        return RandomForestClassifier(**kw)


@dataclass
class GradientBoostingBuilder(ModelBuilder):
    cfg: GradientBoostingConfig
    seed: Optional[int] = None

    def make_estimator(self) -> Any:
        kw = _filtered_kwargs(GradientBoostingClassifier, self.cfg)
        _maybe_set_random_state(GradientBoostingClassifier, kw, self.seed)
        return GradientBoostingClassifier(**kw)


@dataclass
class LDABuilder(ModelBuilder):
    cfg: LDAConfig

    def make_estimator(self) -> Any:
        kw = _filtered_kwargs(LinearDiscriminantAnalysis, self.cfg)
        # shrinkage is only defined for the lsqr/eigen solvers
        if self.cfg.solver == "svd":
            kw.pop("shrinkage", None)
        return LinearDiscriminantAnalysis(**kw)


@dataclass
class QDABuilder(ModelBuilder):
    cfg: QDAConfig

    def make_estimator(self) -> Any:
        kw = _filtered_kwargs(QuadraticDiscriminantAnalysis, self.cfg)
        return QuadraticDiscriminantAnalysis(**kw)
