from __future__ import annotations

from typing import Any, Dict, Optional

from tunekit.contracts.eval_configs import EvalModel
from tunekit.contracts.model_configs import ModelConfig
from tunekit.contracts.results import ResampleResult
from tunekit.contracts.split_configs import SplitConfig
from tunekit.core.task import Task
from tunekit.components.tuning.pipeline import TuningPipeline

from tunekit.use_cases._deps import resolve_eval


def resample(
    task: Task,
    learner: ModelConfig,
    resampling: SplitConfig,
    *,
    assignment: Optional[Dict[str, Any]] = None,
    eval: Optional[EvalModel] = None,
    seed: Optional[int] = None,
) -> ResampleResult:
    """Evaluate a fixed learner configuration under ``resampling``."""
    pipe = TuningPipeline(eval=resolve_eval(eval, seed), stream="resample")
    return pipe.resample(task, learner, resampling, assignment)
