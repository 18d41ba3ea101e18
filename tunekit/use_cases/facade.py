"""Public use-case façade.

This module is the sanctioned invocation surface for tunekit's orchestration
logic. Implementations live in the sibling use-case modules and are imported
lazily so that importing the façade stays cheap.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Sequence, Union

import numpy as np
import pandas as pd

from tunekit.contracts.benchmark_configs import TunedLearner
from tunekit.contracts.eval_configs import EvalModel
from tunekit.contracts.model_configs import ModelConfig
from tunekit.contracts.results import BenchmarkReport, Metrics, ResampleResult, SearchResult
from tunekit.contracts.search_space import SearchSpace
from tunekit.contracts.split_configs import SplitConfig, SplitCVModel
from tunekit.contracts.tuning_configs import GridSearchConfig, SearchConfig
from tunekit.core.model import TrainedModel
from tunekit.core.progress import ProgressCallback
from tunekit.core.task import Task


def define_search_space(specs: Iterable[Any]) -> SearchSpace:
    """Validate hyperparameter domains and return a :class:`SearchSpace`."""

    from tunekit.use_cases.tuning import define_search_space as _define

    return _define(specs)


def tune(
    task: Task,
    learner: ModelConfig,
    search_space: Union[SearchSpace, Iterable[Any]],
    search: SearchConfig = GridSearchConfig(),
    resampling: SplitConfig = SplitCVModel(),
    *,
    eval: Optional[EvalModel] = None,
    seed: Optional[int] = None,
    n_jobs: Optional[int] = None,
    progress: Optional[ProgressCallback] = None,
) -> SearchResult:
    """Tune ``learner`` over ``search_space`` and return a typed :class:`SearchResult`."""

    from tunekit.use_cases.tuning import tune as _tune

    return _tune(
        task,
        learner,
        search_space,
        search,
        resampling,
        eval=eval,
        seed=seed,
        n_jobs=n_jobs,
        progress=progress,
    )


def train_final(
    task: Task,
    learner: ModelConfig,
    assignment: Optional[Dict[str, Any]] = None,
    *,
    eval: Optional[EvalModel] = None,
    seed: Optional[int] = None,
) -> TrainedModel:
    """Fit a learner once on the full task."""

    from tunekit.use_cases.tuning import train_final as _train

    return _train(task, learner, assignment, eval=eval, seed=seed)


def evaluate_out_of_sample(model: TrainedModel, holdout: Union[Task, pd.DataFrame]) -> Metrics:
    """Score a trained model on labelled holdout rows."""

    from tunekit.use_cases.tuning import evaluate_out_of_sample as _evaluate

    return _evaluate(model, holdout)


def predict(model: TrainedModel, rows: Any) -> np.ndarray:
    """Predict for new rows carrying the training features."""

    from tunekit.use_cases.tuning import predict as _predict

    return _predict(model, rows)


def resample(
    task: Task,
    learner: ModelConfig,
    resampling: SplitConfig,
    *,
    assignment: Optional[Dict[str, Any]] = None,
    eval: Optional[EvalModel] = None,
    seed: Optional[int] = None,
) -> ResampleResult:
    """Evaluate a fixed learner under a resampling strategy."""

    from tunekit.use_cases.resampling import resample as _resample

    return _resample(task, learner, resampling, assignment=assignment, eval=eval, seed=seed)


def run_benchmark(
    task: Task,
    wrapped_learners: Sequence[TunedLearner],
    outer_resampling: SplitConfig,
    *,
    eval: Optional[EvalModel] = None,
    seed: Optional[int] = None,
    n_jobs: Optional[int] = None,
    progress: Optional[ProgressCallback] = None,
) -> BenchmarkReport:
    """Nested-resampling comparison of self-tuning learners."""

    from tunekit.use_cases.benchmark import run_benchmark as _run

    return _run(
        task,
        wrapped_learners,
        outer_resampling,
        eval=eval,
        seed=seed,
        n_jobs=n_jobs,
        progress=progress,
    )
