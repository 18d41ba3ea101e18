from __future__ import annotations

import inspect
from typing import Any, Dict, Optional

from sklearn.pipeline import Pipeline
from sklearn.preprocessing import StandardScaler


def _filtered_kwargs(estimator_cls: type, cfg_obj: Any, *, exclude: set[str] = {"algo"}) -> Dict[str, Any]:
    """Dump cfg to dict, drop None, remove 'algo', and keep only kwargs accepted by estimator."""
    raw = cfg_obj.model_dump(exclude=exclude, exclude_none=True)
    sig = inspect.signature(estimator_cls)
    allowed = set(sig.parameters.keys())
    return {k: v for k, v in raw.items() if k in allowed}


def _maybe_set_random_state(estimator_cls: type, kw: Dict[str, Any], seed: Optional[int]) -> None:
    if seed is None:
        return
    sig = inspect.signature(estimator_cls)
    if "random_state" in sig.parameters and "random_state" not in kw:
        kw["random_state"] = int(seed)


def _with_scaling(estimator: Any, scale: bool) -> Any:
    """Prepend a StandardScaler when ``scale`` is set (step names: scale, clf)."""
    if not scale:
        return estimator
    return Pipeline(steps=[("scale", StandardScaler()), ("clf", estimator)])
