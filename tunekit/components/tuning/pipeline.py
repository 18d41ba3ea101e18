from __future__ import annotations

"""Tuning pipeline: search, final training and out-of-sample evaluation.

A pipeline instance carries only run-wide settings (evaluation measure and
seed, worker bound, progress sink). Each operation takes its task and
learner explicitly and never mutates them.

Randomness comes from named child streams of the evaluation seed:
``<stream>/split`` for partitions, ``<stream>/sampler`` for random search and
``<stream>/model`` for estimator seeds. The same seed therefore reproduces the
same partitions, candidates and fitted models.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Union

import numpy as np
import pandas as pd

from tunekit.contracts.eval_configs import EvalModel
from tunekit.contracts.model_configs import ModelConfig, get_model_task
from tunekit.contracts.results import Metrics, ResampleResult, SearchResult
from tunekit.contracts.search_space import SearchSpace
from tunekit.contracts.split_configs import SplitConfig, SplitCVModel
from tunekit.contracts.tuning_configs import GridSearchConfig, SearchConfig
from tunekit.core.model import TrainedModel
from tunekit.core.progress import ProgressCallback
from tunekit.core.task import Task
from tunekit.errors import ResamplingFailureError, SchemaMismatchError
from tunekit.factories.eval_factory import make_evaluator
from tunekit.factories.model_factory import make_model
from tunekit.factories.search_factory import make_search_strategy
from tunekit.factories.split_factory import make_splitter
from tunekit.runtime.random.rng import RngManager

from tunekit.components.evaluation.metrics import all_measures
from tunekit.components.prediction.predicting import predict_labels
from tunekit.components.prediction.schema import RowsLike, align_rows
from tunekit.components.splitters.types import Split
from tunekit.components.trainers.fitting import fit_model, oob_error

from .folds import evaluate_assignment
from .runner import SearchRunner, apply_assignment
from .space import SpecLike, define_search_space

logger = logging.getLogger(__name__)


def check_learner_fits_task(task: Task, learner: ModelConfig) -> None:
    learner_task = get_model_task(learner)
    if learner_task != task.problem:
        raise ValueError(
            f"Learner {learner.algo!r} solves {learner_task} but task {task.id!r} is {task.problem}"
        )


def _aggregate(fold_metrics: List[Metrics]) -> tuple[Dict[str, float], Dict[str, float]]:
    names = list(fold_metrics[0].measures)
    mean = {k: float(np.mean([m.measures[k] for m in fold_metrics])) for k in names}
    std = {k: float(np.std([m.measures[k] for m in fold_metrics])) for k in names}
    return mean, std


@dataclass(frozen=True)
class TuningPipeline:
    eval: EvalModel = field(default_factory=EvalModel)
    n_jobs: Optional[int] = None
    progress: Optional[ProgressCallback] = None
    stream: str = "tuning"

    define_search_space = staticmethod(define_search_space)

    @property
    def rngm(self) -> RngManager:
        return RngManager(self.eval.seed)

    @property
    def model_seed(self) -> int:
        return self.rngm.child_seed(f"{self.stream}/model")

    # ------------------------------------------------------------------

    def partitions(self, task: Task, resampling: SplitConfig) -> List[Split]:
        """Materialize the train/test index sets once; every candidate reuses them."""
        stratify = True
        if task.problem == "regression" and getattr(resampling, "stratified", False):
            logger.warning(
                "Stratified resampling requested for regression task %s; using unstratified splits",
                task.id,
            )
            stratify = False

        splitter = make_splitter(
            resampling,
            seed=self.rngm.child_seed(f"{self.stream}/split"),
            stratify=stratify,
        )
        try:
            splits = list(splitter.split(task.X, task.y))
        except ValueError as e:
            raise ResamplingFailureError(f"Cannot partition task {task.id!r} ({task.n_rows} rows): {e}") from e
        if not splits:
            raise ResamplingFailureError(f"Resampling produced no splits for task {task.id!r}")
        return splits

    def tune(
        self,
        task: Task,
        learner: ModelConfig,
        search_space: Union[SearchSpace, Iterable[SpecLike]],
        search: SearchConfig = GridSearchConfig(),
        resampling: SplitConfig = SplitCVModel(),
    ) -> SearchResult:
        """Find the assignment with the lowest mean resampled loss.

        Raises
        ------
        InvalidDomainError
            The space names a hyperparameter the learner does not have, or a
            candidate value is invalid for it.
        EmptySearchSpaceError
            The strategy produced no candidates.
        ResamplingFailureError
            A fold could not be fit or scored for some candidate.
        """
        check_learner_fits_task(task, learner)
        space = search_space if isinstance(search_space, SearchSpace) else define_search_space(search_space)
        evaluator = make_evaluator(self.eval, kind=task.problem)
        splits = self.partitions(task, resampling)

        runner = SearchRunner(
            learner=learner,
            space=space,
            strategy=make_search_strategy(search, self.rngm, stream=self.stream),
            evaluator=evaluator,
            model_seed=self.model_seed,
            n_jobs=self.n_jobs if self.n_jobs is not None else search.n_jobs,
            progress=self.progress,
        )
        return runner.run(task, splits)

    def train_final(
        self,
        task: Task,
        learner: ModelConfig,
        assignment: Optional[Dict[str, Any]] = None,
    ) -> TrainedModel:
        """Fit ``learner`` with ``assignment`` applied on every row of ``task``."""
        check_learner_fits_task(task, learner)
        assignment = dict(assignment or {})
        cfg = apply_assignment(learner, assignment)

        X, y = task.X, task.y
        est = make_model(cfg, seed=self.model_seed).make_estimator()
        fit_model(est, X, y)

        oob = oob_error(est, y, kind=task.problem)
        logger.info(
            "Trained %s on %s (%d rows) with %s%s",
            cfg.algo,
            task.id,
            task.n_rows,
            assignment,
            "" if oob is None else f"; OOB error {oob:.4f}",
        )
        return TrainedModel(
            estimator=est,
            learner=cfg,
            task_id=task.id,
            problem=task.problem,
            target=task.target,
            feature_names=tuple(task.feature_names),
            assignment=assignment,
            classes=tuple(task.classes) if task.problem == "classification" else None,
            n_train=task.n_rows,
            oob_error=oob,
        )

    def evaluate_out_of_sample(self, model: TrainedModel, holdout: Union[Task, pd.DataFrame]) -> Metrics:
        """Score a trained model on labelled rows it has not been trained on."""
        if isinstance(holdout, Task):
            if holdout.problem != model.problem:
                raise SchemaMismatchError(
                    f"Holdout task is {holdout.problem} but the model was trained for {model.problem}"
                )
            rows = holdout.data
        else:
            rows = holdout

        X, y = align_rows(rows, model.feature_names, target=model.target, require_target=True)
        if model.problem == "regression":
            y = y.astype(float)
        y_pred = predict_labels(model.estimator, X)
        return Metrics(
            problem=model.problem,
            n_rows=int(X.shape[0]),
            measures=all_measures(y, y_pred, kind=model.problem),
        )

    def predict(self, model: TrainedModel, rows: RowsLike) -> np.ndarray:
        """Predict for new rows (DataFrame, Series or a single-row mapping); a target column is ignored."""
        return model.predict(rows)

    def resample(
        self,
        task: Task,
        learner: ModelConfig,
        resampling: SplitConfig = SplitCVModel(),
        assignment: Optional[Dict[str, Any]] = None,
    ) -> ResampleResult:
        """Estimate the performance of a fixed learner under ``resampling``."""
        check_learner_fits_task(task, learner)
        assignment = dict(assignment or {})
        cfg = apply_assignment(learner, assignment)
        evaluator = make_evaluator(self.eval, kind=task.problem)
        splits = self.partitions(task, resampling)

        outcome = evaluate_assignment(
            index=0,
            learner=cfg,
            assignment=assignment,
            X=task.X,
            y=task.y,
            splits=splits,
            evaluator=evaluator,
            seed=self.model_seed,
        )
        outcome.raise_for_failure()

        fold_metrics = [
            Metrics(problem=task.problem, n_rows=n, measures=m)
            for n, m in zip(outcome.fold_sizes, outcome.fold_measures)
        ]
        mean, std = _aggregate(fold_metrics)
        logger.info(
            "Resampled %s on %s over %d split(s): %s=%.4f",
            cfg.algo,
            task.id,
            len(splits),
            evaluator.measure,
            mean[evaluator.measure],
        )
        return ResampleResult(
            learner=cfg.algo,
            measure=evaluator.measure,
            assignment=assignment,
            n_folds=max(s.fold for s in splits) + 1,
            n_repeats=max(s.repetition for s in splits) + 1,
            fold_metrics=fold_metrics,
            aggregate=mean,
            std=std,
        )


__all__ = ["TuningPipeline", "check_learner_fits_task"]
