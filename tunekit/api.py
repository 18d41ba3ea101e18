"""Public tunekit API.

This module is the **stable public surface** for invoking use-cases.

Prefer importing from here instead of reaching into internal subpackages:

    from tunekit.api import define_search_space, tune, train_final

The underlying implementations live under :mod:`tunekit.use_cases`.
"""

from __future__ import annotations

from tunekit.use_cases.facade import (
    define_search_space,
    evaluate_out_of_sample,
    predict,
    resample,
    run_benchmark,
    train_final,
    tune,
)

# Non-use-case helpers that are still part of the stable public surface.
from tunekit.core.task import Task
from tunekit.core.model import TrainedModel
from tunekit.core.progress import ProgressCallback
from tunekit.core.logging import configure_logging
from tunekit.io.readers import load_task
from tunekit.extras.datasets import load_wine_task
from tunekit.components.tuning.presets import (
    boosting_space,
    discriminant_space,
    forest_space,
    knn_grid,
    lda_solver_space,
)

__all__ = [
    "define_search_space",
    "tune",
    "train_final",
    "evaluate_out_of_sample",
    "predict",
    "resample",
    "run_benchmark",
    "Task",
    "TrainedModel",
    "ProgressCallback",
    "configure_logging",
    "load_task",
    "load_wine_task",
    "knn_grid",
    "forest_space",
    "boosting_space",
    "discriminant_space",
    "lda_solver_space",
]
