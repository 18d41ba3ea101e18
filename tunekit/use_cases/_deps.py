"""Dependency helpers for use-cases.

Use-cases accept their dependencies (evaluation settings, seed) explicitly and
never read module-level state.
"""

from __future__ import annotations

from typing import Optional

from tunekit.contracts.eval_configs import EvalModel


def resolve_eval(eval_cfg: Optional[EvalModel], seed: Optional[int] = None) -> EvalModel:
    """Return ``eval_cfg`` (default :class:`EvalModel`) with ``seed`` applied when given.

    The input config is never mutated.
    """
    cfg = eval_cfg if eval_cfg is not None else EvalModel()
    if seed is None:
        return cfg
    return cfg.model_copy(update={"seed": int(seed)})
