from __future__ import annotations
from typing import Literal

from tunekit.contracts.eval_configs import EvalModel
from tunekit.components.interfaces import Evaluator
from tunekit.components.evaluation.evaluators import SklearnEvaluator
from tunekit.components.evaluation.metrics import resolve_measure


def make_evaluator(
    cfg: EvalModel,
    *,
    kind: Literal["classification", "regression"] = "classification",
) -> Evaluator:
    """
    Create an evaluator strategy from config. The measure is checked against
    ``kind`` here, so a regression loss on a classification task fails early.
    """
    return SklearnEvaluator(kind=kind, measure=resolve_measure(kind, cfg.measure))
