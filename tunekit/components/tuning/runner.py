from __future__ import annotations

import logging
from contextlib import closing
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
from pydantic import ValidationError

from tunekit.contracts.model_configs import ModelConfig, tunable_params, with_assignment
from tunekit.contracts.results import CandidateEvaluation, SearchResult
from tunekit.contracts.search_space import SearchSpace
from tunekit.core.progress import ProgressCallback
from tunekit.core.task import Task
from tunekit.components.evaluation.evaluators import SklearnEvaluator
from tunekit.components.interfaces import SearchStrategy
from tunekit.components.splitters.types import Split
from tunekit.errors import EmptySearchSpaceError, InvalidDomainError

from .executor import run_tasks
from .folds import CandidateOutcome, evaluate_assignment

logger = logging.getLogger(__name__)


def check_space_for_learner(space: SearchSpace, learner: ModelConfig) -> None:
    """Every searched name must be a hyperparameter the learner declares."""
    known = tunable_params(learner)
    unknown = [n for n in space.names if n not in known]
    if unknown:
        raise InvalidDomainError(
            f"{type(learner).__name__} has no hyperparameter(s) {unknown}; known: {sorted(known)}",
            param_name=unknown[0],
        )


def apply_assignment(learner: ModelConfig, assignment: Dict[str, Any]) -> ModelConfig:
    """``with_assignment`` with unknown names and pydantic errors reported as domain errors."""
    unknown = sorted(set(assignment) - tunable_params(learner))
    if unknown:
        raise InvalidDomainError(
            f"{type(learner).__name__} has no hyperparameter(s) {unknown}",
            param_name=unknown[0],
        )
    try:
        return with_assignment(learner, assignment)
    except ValidationError as e:
        name = next(iter(assignment), None)
        for err in e.errors():
            loc = err.get("loc") or ()
            if loc and loc[0] in assignment:
                name = str(loc[0])
                break
        raise InvalidDomainError(
            f"Assignment {assignment} is not valid for {type(learner).__name__}: {e}",
            param_name=name,
        ) from e


@dataclass
class SearchRunner:
    """
    Evaluates every candidate of ``strategy`` on one shared list of splits and
    picks the one with the lowest mean loss (first wins on ties).

    Candidate evaluations are independent and fan out over joblib workers;
    results are reduced in candidate order, so the outcome does not depend on
    ``n_jobs``.
    """

    learner: ModelConfig
    space: SearchSpace
    strategy: SearchStrategy
    evaluator: SklearnEvaluator
    model_seed: Optional[int] = None
    n_jobs: Optional[int] = None
    progress: Optional[ProgressCallback] = None

    def run(self, task: Task, splits: Sequence[Split]) -> SearchResult:
        check_space_for_learner(self.space, self.learner)

        candidates = self.strategy.candidates(self.space)
        if not candidates:
            raise EmptySearchSpaceError(
                f"{getattr(self.strategy, 'name', type(self.strategy).__name__)} produced no candidates "
                f"for space {self.space.names}"
            )
        configs = [apply_assignment(self.learner, cand) for cand in candidates]

        strategy_name = getattr(self.strategy, "name", type(self.strategy).__name__)
        logger.info(
            "%s: %d candidate(s) x %d split(s) for %s on %s",
            strategy_name,
            len(candidates),
            len(splits),
            self.learner.algo,
            task.id,
        )

        X, y = task.X, task.y
        jobs = (
            dict(
                index=i,
                learner=cfg,
                assignment=cand,
                X=X,
                y=y,
                splits=splits,
                evaluator=self.evaluator,
                seed=self.model_seed,
            )
            for i, (cfg, cand) in enumerate(zip(configs, candidates))
        )

        if self.progress is not None:
            self.progress.init(total=len(candidates), label=strategy_name)

        outcomes: List[CandidateOutcome] = []
        with closing(run_tasks(evaluate_assignment, jobs, n_jobs=self.n_jobs)) as results:
            for done, outcome in enumerate(results, start=1):
                if not outcome.ok:
                    logger.warning(
                        "Candidate %d %s failed: %s", outcome.index, outcome.assignment, outcome.failure.reason
                    )
                    outcome.raise_for_failure()
                outcomes.append(outcome)
                if self.progress is not None:
                    self.progress.update(current=done, label=strategy_name)

        if self.progress is not None:
            self.progress.finalize(label=strategy_name)

        return self._reduce(outcomes, strategy_name)

    def _reduce(self, outcomes: List[CandidateOutcome], strategy_name: str) -> SearchResult:
        trace = [
            CandidateEvaluation(
                index=o.index,
                assignment=o.assignment,
                mean_error=float(np.mean(o.fold_losses)),
                std_error=float(np.std(o.fold_losses)),
                fold_errors=list(o.fold_losses),
            )
            for o in outcomes
        ]
        best = int(np.argmin([c.mean_error for c in trace]))
        logger.info(
            "%s best %s=%.4f at %s",
            strategy_name,
            self.evaluator.measure,
            trace[best].mean_error,
            trace[best].assignment,
        )
        return SearchResult(
            strategy=strategy_name,
            measure=self.evaluator.measure,
            n_candidates=len(trace),
            best_index=best,
            best_assignment=trace[best].assignment,
            best_error=trace[best].mean_error,
            trace=trace,
        )


__all__ = ["SearchRunner", "apply_assignment", "check_space_for_learner"]
