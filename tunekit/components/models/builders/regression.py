from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from sklearn.ensemble import GradientBoostingRegressor, RandomForestRegressor
from sklearn.neighbors import KNeighborsRegressor

from tunekit.contracts.model_configs import (
    GradientBoostingRegressorConfig,
    KNNRegressorConfig,
    RandomForestRegressorConfig,
)
from tunekit.components.interfaces import ModelBuilder

from .common import _filtered_kwargs, _maybe_set_random_state, _with_scaling


@dataclass
class KNNRegressorBuilder(ModelBuilder):
    cfg: KNNRegressorConfig

    def make_estimator(self) -> Any:
        kw = _filtered_kwargs(KNeighborsRegressor, self.cfg)
        return _with_scaling(KNeighborsRegressor(**kw), self.cfg.scale)


@dataclass
class RandomForestRegressorBuilder(ModelBuilder):
    cfg: RandomForestRegressorConfig
    seed: Optional[int] = None

    def make_estimator(self) -> Any:
        kw = _filtered_kwargs(RandomForestRegressor, self.cfg)
        _maybe_set_random_state(RandomForestRegressor, kw, self.seed)
        if not self.cfg.bootstrap:
            kw["oob_score"] = False
            kw.pop("max_samples", None)
        return RandomForestRegressor(**kw)


@dataclass
class GradientBoostingRegressorBuilder(ModelBuilder):
    cfg: GradientBoostingRegressorConfig
    seed: Optional[int] = None

    def make_estimator(self) -> Any:
        kw = _filtered_kwargs(GradientBoostingRegressor, self.cfg)
        _maybe_set_random_state(GradientBoostingRegressor, kw, self.seed)
        return GradientBoostingRegressor(**kw)
