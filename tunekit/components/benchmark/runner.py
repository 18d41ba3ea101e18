from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from tunekit.contracts.benchmark_configs import TunedLearner
from tunekit.contracts.eval_configs import EvalModel
from tunekit.contracts.results import BenchmarkReport, BenchmarkRow, Metrics
from tunekit.contracts.split_configs import SplitConfig
from tunekit.core.progress import ProgressCallback
from tunekit.core.task import Task
from tunekit.errors import LearnerDivergenceError
from tunekit.runtime.random.rng import RngManager

from tunekit.components.evaluation.metrics import resolve_measure
from tunekit.components.tuning.pipeline import TuningPipeline, check_learner_fits_task

logger = logging.getLogger(__name__)


@dataclass
class _RowState:
    algo: str
    fold_scores: List[Optional[float]] = field(default_factory=list)
    fold_metrics: List[Optional[Metrics]] = field(default_factory=list)
    best_assignments: List[Optional[Dict[str, Any]]] = field(default_factory=list)
    failures: List[LearnerDivergenceError] = field(default_factory=list)

    def record_failure(self, err: LearnerDivergenceError) -> None:
        self.failures.append(err)
        self.fold_scores.append(None)
        self.fold_metrics.append(None)
        self.best_assignments.append(None)

    def to_row(self, learner_id: str) -> BenchmarkRow:
        done = [m for m in self.fold_metrics if m is not None]
        aggregate: Dict[str, float] = {}
        std: Dict[str, float] = {}
        if done:
            for name in done[0].measures:
                values = [m.measures[name] for m in done]
                aggregate[name] = float(np.mean(values))
                std[name] = float(np.std(values))

        first = self.failures[0] if self.failures else None
        return BenchmarkRow(
            learner_id=learner_id,
            algo=self.algo,
            fold_scores=self.fold_scores,
            fold_metrics=self.fold_metrics,
            best_assignments=self.best_assignments,
            aggregate=aggregate,
            std=std,
            error=None if first is None else str(first),
            error_type=None if first is None else type(first).__name__,
            failed_folds=[f.fold_index for f in self.failures],
        )


@dataclass
class BenchmarkRunner:
    """
    Nested resampling over a set of self-tuning learners.

    For every outer fold, each learner is tuned on the fold's training portion
    only, refit there with its best assignment and scored on the held-out
    portion. A learner that fails on a fold gets the failure recorded in its
    row; its siblings and the remaining folds carry on.
    """

    learners: Sequence[TunedLearner]
    outer: SplitConfig
    eval: EvalModel = field(default_factory=EvalModel)
    n_jobs: Optional[int] = None
    progress: Optional[ProgressCallback] = None

    def _validate(self, task: Task) -> None:
        if not self.learners:
            raise ValueError("Benchmark needs at least one learner")
        ids = [tl.identity for tl in self.learners]
        dupes = sorted({i for i in ids if ids.count(i) > 1})
        if dupes:
            raise ValueError(f"Learner ids must be unique; duplicated: {dupes}")
        for tl in self.learners:
            check_learner_fits_task(task, tl.learner)

    def run(self, task: Task) -> BenchmarkReport:
        self._validate(task)
        measure = resolve_measure(task.problem, self.eval.measure)
        rngm = RngManager(self.eval.seed)

        outer_splits = TuningPipeline(eval=self.eval, stream="benchmark/outer").partitions(task, self.outer)
        states = {tl.identity: _RowState(algo=tl.learner.algo) for tl in self.learners}

        total = len(outer_splits) * len(self.learners)
        logger.info(
            "Benchmark on %s: %d learner(s) x %d outer fold(s), measure=%s",
            task.id,
            len(self.learners),
            len(outer_splits),
            measure,
        )
        if self.progress is not None:
            self.progress.init(total=total, label="benchmark")

        done = 0
        for pos, split in enumerate(outer_splits):
            train = task.subset(split.idx_tr, suffix=f"outer{pos}/train")
            test = task.subset(split.idx_te, suffix=f"outer{pos}/test")

            for tl in self.learners:
                lid = tl.identity
                inner = TuningPipeline(
                    eval=EvalModel(measure=measure, seed=rngm.child_seed(f"benchmark/{lid}/outer{pos}")),
                    n_jobs=self.n_jobs,
                )
                self._run_one(inner, tl, train, test, pos, measure, states[lid])

                done += 1
                if self.progress is not None:
                    self.progress.update(current=done, label=lid)

        if self.progress is not None:
            self.progress.finalize(label="benchmark")

        rows = {lid: state.to_row(lid) for lid, state in states.items()}
        for lid, row in rows.items():
            if row.ok:
                logger.info("%s: %s=%.4f", lid, measure, row.aggregate[measure])
            else:
                logger.warning("%s diverged on outer fold(s) %s", lid, row.failed_folds)

        return BenchmarkReport(
            task_id=task.id,
            measure=measure,
            n_outer_folds=len(outer_splits),
            rows=rows,
        )

    @staticmethod
    def _run_one(
        inner: TuningPipeline,
        tl: TunedLearner,
        train: Task,
        test: Task,
        pos: int,
        measure: str,
        state: _RowState,
    ) -> None:
        lid = tl.identity
        try:
            result = inner.tune(train, tl.learner, tl.search_space, tl.search, tl.resampling)
            model = inner.train_final(train, tl.learner, result.best_assignment)
            metrics = inner.evaluate_out_of_sample(model, test)
            score = metrics[measure]
            if not math.isfinite(score):
                raise LearnerDivergenceError(
                    f"{lid} produced a non-finite {measure} ({score}) on outer fold {pos}",
                    learner_id=lid,
                    fold_index=pos,
                )
        except LearnerDivergenceError as e:
            logger.warning("%s", e)
            state.record_failure(e)
            return
        except Exception as e:
            err = LearnerDivergenceError(
                f"{lid} failed on outer fold {pos}: {type(e).__name__}: {e}",
                learner_id=lid,
                fold_index=pos,
            )
            err.__cause__ = e
            logger.warning("%s", err)
            state.record_failure(err)
            return

        state.fold_scores.append(float(score))
        state.fold_metrics.append(metrics)
        state.best_assignments.append(dict(result.best_assignment))


__all__ = ["BenchmarkRunner"]
