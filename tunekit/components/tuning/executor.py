from __future__ import annotations

"""Bounded fan-out of candidate evaluations over joblib workers."""

import logging
from typing import Any, Callable, Iterable, Iterator, Optional

from joblib import Parallel, cpu_count, delayed, effective_n_jobs

from tunekit.runtime.settings import get_default_n_jobs

logger = logging.getLogger(__name__)


def resolve_n_jobs(n_jobs: Optional[int]) -> int:
    """Worker count for a run: explicit value, else ``TUNEKIT_N_JOBS``; capped at the CPU count."""
    requested = get_default_n_jobs() if n_jobs is None else int(n_jobs)
    if requested == 0:
        raise ValueError("n_jobs == 0 has no meaning; use a positive count or -1 for all CPUs")
    return max(1, min(effective_n_jobs(requested), cpu_count()))


def run_tasks(
    fn: Callable[..., Any],
    kwargs_list: Iterable[dict],
    *,
    n_jobs: Optional[int] = None,
) -> Iterator[Any]:
    """Yield ``fn(**kwargs)`` for every entry of ``kwargs_list``, in submission order.

    Workers are released when the generator is exhausted or closed, including
    when the consumer raises mid-iteration.
    """
    workers = resolve_n_jobs(n_jobs)
    logger.debug("Dispatching candidate evaluations to %d worker(s)", workers)
    with Parallel(n_jobs=workers, return_as="generator") as parallel:
        yield from parallel(delayed(fn)(**kw) for kw in kwargs_list)


__all__ = ["resolve_n_jobs", "run_tasks"]
