from __future__ import annotations

"""Evaluation of one candidate assignment over a fixed list of splits.

``evaluate_assignment`` runs inside joblib workers, so it never raises for
fold-level problems: it returns a :class:`CandidateOutcome` and the parent
process turns a recorded failure into :class:`ResamplingFailureError`.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from tunekit.components.evaluation.evaluators import SklearnEvaluator
from tunekit.components.prediction.predicting import predict_labels
from tunekit.components.splitters.types import Split
from tunekit.components.trainers.fitting import fit_model
from tunekit.errors import ResamplingFailureError
from tunekit.factories.model_factory import make_model


@dataclass
class FoldFailure:
    position: int
    fold: int
    repetition: int
    reason: str


@dataclass
class CandidateOutcome:
    index: int
    assignment: Dict[str, Any]
    fold_losses: List[float] = field(default_factory=list)
    fold_measures: List[Dict[str, float]] = field(default_factory=list)
    fold_sizes: List[int] = field(default_factory=list)
    failure: Optional[FoldFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    def raise_for_failure(self) -> None:
        f = self.failure
        if f is None:
            return
        raise ResamplingFailureError(
            f"Candidate {self.index} {self.assignment} failed on fold {f.fold} "
            f"(repetition {f.repetition}): {f.reason}",
            fold_index=f.fold,
            repetition=f.repetition,
            assignment=self.assignment,
        )


def evaluate_assignment(
    *,
    index: int,
    learner: Any,
    assignment: Dict[str, Any],
    X: np.ndarray,
    y: np.ndarray,
    splits: Sequence[Split],
    evaluator: SklearnEvaluator,
    seed: Optional[int],
) -> CandidateOutcome:
    """Fit ``learner`` (already carrying ``assignment``) on every split and score it.

    Stops at the first failing fold: a classification training portion with a
    single class, an estimator error, or a non-finite loss.
    """
    out = CandidateOutcome(index=index, assignment=dict(assignment))
    classification = evaluator.kind == "classification"

    for pos, split in enumerate(splits):
        y_tr = y[split.idx_tr]
        if classification and np.unique(y_tr).size < 2:
            out.failure = FoldFailure(pos, split.fold, split.repetition, "training portion has a single class")
            return out

        try:
            est = make_model(learner, seed=seed).make_estimator()
            fit_model(est, X[split.idx_tr], y_tr)
            y_pred = predict_labels(est, X[split.idx_te])
        except Exception as e:
            out.failure = FoldFailure(pos, split.fold, split.repetition, f"{type(e).__name__}: {e}")
            return out

        y_te = y[split.idx_te]
        fold_loss = evaluator.loss(y_te, y_pred)
        if not math.isfinite(fold_loss):
            out.failure = FoldFailure(pos, split.fold, split.repetition, f"non-finite loss {fold_loss}")
            return out

        out.fold_losses.append(fold_loss)
        out.fold_measures.append(evaluator.measures(y_te, y_pred))
        out.fold_sizes.append(int(split.idx_te.shape[0]))

    return out


__all__ = ["CandidateOutcome", "FoldFailure", "evaluate_assignment"]
