from __future__ import annotations

from typing import Optional, Sequence

from tunekit.contracts.benchmark_configs import TunedLearner
from tunekit.contracts.eval_configs import EvalModel
from tunekit.contracts.results import BenchmarkReport
from tunekit.contracts.split_configs import SplitConfig
from tunekit.core.progress import ProgressCallback
from tunekit.core.task import Task
from tunekit.components.benchmark.runner import BenchmarkRunner

from tunekit.use_cases._deps import resolve_eval


def run_benchmark(
    task: Task,
    wrapped_learners: Sequence[TunedLearner],
    outer_resampling: SplitConfig,
    *,
    eval: Optional[EvalModel] = None,
    seed: Optional[int] = None,
    n_jobs: Optional[int] = None,
    progress: Optional[ProgressCallback] = None,
) -> BenchmarkReport:
    """Compare self-tuning learners with nested resampling.

    Per-learner failures are recorded in the report instead of raised.
    """
    runner = BenchmarkRunner(
        learners=list(wrapped_learners),
        outer=outer_resampling,
        eval=resolve_eval(eval, seed),
        n_jobs=n_jobs,
        progress=progress,
    )
    return runner.run(task)
