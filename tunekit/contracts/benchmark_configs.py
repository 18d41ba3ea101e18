from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .model_configs import ModelConfig
from .search_space import SearchSpace
from .split_configs import SplitCVModel, SplitConfig
from .tuning_configs import GridSearchConfig, SearchConfig


class TunedLearner(BaseModel):
    """A learner bundled with its tuning setup (a self-tuning estimator).

    Inside a benchmark the inner search runs on each outer fold's training
    portion only. ``search`` defaults to an exhaustive grid; large spaces such
    as ``forest_space`` want ``RandomizedSearchConfig`` instead.
    """

    model_config = ConfigDict(frozen=True)

    learner: ModelConfig
    search_space: SearchSpace
    search: SearchConfig = Field(default_factory=GridSearchConfig)
    resampling: SplitConfig = Field(default_factory=SplitCVModel)
    learner_id: Optional[str] = None

    @property
    def identity(self) -> str:
        return self.learner_id or f"{self.learner.algo}.tuned"
