from __future__ import annotations

"""Small sklearn-centric helpers.

Uses duck-typing instead of importing sklearn at import time.
"""

from typing import Any


def unwrap_final_estimator(model: Any) -> Any:
    """Return the final estimator for a Pipeline-like model, else the model itself."""
    steps = getattr(model, "steps", None)
    if isinstance(steps, list) and len(steps) > 0:
        return steps[-1][1]
    return model


__all__ = ["unwrap_final_estimator"]
