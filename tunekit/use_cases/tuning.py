"""Tuning use-cases: search-space definition, search, final fit, evaluation.

Thin wrappers over :class:`tunekit.components.tuning.pipeline.TuningPipeline`
that take plain arguments and optional evaluation settings.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Union

import numpy as np
import pandas as pd

from tunekit.contracts.eval_configs import EvalModel
from tunekit.contracts.model_configs import ModelConfig
from tunekit.contracts.results import Metrics, SearchResult
from tunekit.contracts.search_space import SearchSpace
from tunekit.contracts.split_configs import SplitConfig, SplitCVModel
from tunekit.contracts.tuning_configs import GridSearchConfig, SearchConfig
from tunekit.core.model import TrainedModel
from tunekit.core.progress import ProgressCallback
from tunekit.core.task import Task
from tunekit.components.prediction.schema import RowsLike
from tunekit.components.tuning.pipeline import TuningPipeline
from tunekit.components.tuning.space import SpecLike
from tunekit.components.tuning.space import define_search_space as _define

from tunekit.use_cases._deps import resolve_eval


def define_search_space(specs: Iterable[SpecLike]) -> SearchSpace:
    """Validate hyperparameter domains; raises ``InvalidDomainError``."""
    return _define(specs)


def tune(
    task: Task,
    learner: ModelConfig,
    search_space: Union[SearchSpace, Iterable[SpecLike]],
    search: SearchConfig = GridSearchConfig(),
    resampling: SplitConfig = SplitCVModel(),
    *,
    eval: Optional[EvalModel] = None,
    seed: Optional[int] = None,
    n_jobs: Optional[int] = None,
    progress: Optional[ProgressCallback] = None,
) -> SearchResult:
    """Search ``search_space`` for the assignment minimizing the resampled loss."""
    pipe = TuningPipeline(eval=resolve_eval(eval, seed), n_jobs=n_jobs, progress=progress)
    return pipe.tune(task, learner, search_space, search, resampling)


def train_final(
    task: Task,
    learner: ModelConfig,
    assignment: Optional[Dict[str, Any]] = None,
    *,
    eval: Optional[EvalModel] = None,
    seed: Optional[int] = None,
) -> TrainedModel:
    """Fit ``learner`` with ``assignment`` on the whole task."""
    return TuningPipeline(eval=resolve_eval(eval, seed)).train_final(task, learner, assignment)


def evaluate_out_of_sample(model: TrainedModel, holdout: Union[Task, pd.DataFrame]) -> Metrics:
    """Score ``model`` on labelled rows; raises ``SchemaMismatchError`` on column drift."""
    return TuningPipeline().evaluate_out_of_sample(model, holdout)


def predict(model: TrainedModel, rows: RowsLike) -> np.ndarray:
    return TuningPipeline().predict(model, rows)
