from __future__ import annotations

"""Learner configuration contracts (facade).

The per-family config classes live in `tunekit.contracts.model_families.*`.
This module remains the stable import path for the rest of the codebase and
adds the small helpers used to inspect a learner config.
"""

from typing import Any, Dict, FrozenSet

from .model_families import *  # noqa: F403
from .model_families import __all__ as _family_names


def get_model_task(model_cfg: Any) -> str:
    return getattr(model_cfg.__class__, "task", "classification")


def tunable_params(model_cfg: Any) -> FrozenSet[str]:
    """Names of the hyperparameters a learner declares (every field but ``algo``)."""
    fields = type(model_cfg).model_fields
    return frozenset(name for name in fields if name != "algo")


def with_assignment(model_cfg: Any, assignment: Dict[str, Any]) -> Any:
    """Return a validated copy of ``model_cfg`` with ``assignment`` applied.

    The input config is never mutated.
    """
    if not assignment:
        return model_cfg
    payload = model_cfg.model_dump()
    payload.update(assignment)
    return type(model_cfg).model_validate(payload)


__all__ = list(_family_names) + [
    "get_model_task",
    "tunable_params",
    "with_assignment",
]
