from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import numpy as np
from scipy import stats
from sklearn.model_selection import ParameterGrid

from tunekit.contracts.search_space import CategoricalParam, ContinuousParam, IntegerParam, SearchSpace

from ..interfaces import SearchStrategy
from .space import grid_values


def _to_py(v: Any) -> Any:
    if isinstance(v, np.generic):
        return v.item()
    return v


@dataclass(frozen=True)
class GridSearchStrategy(SearchStrategy):
    """Cartesian product of the discretized domains, in a fixed order."""

    resolution: Optional[int] = None

    name = "grid_search"

    def candidates(self, space: SearchSpace) -> List[Dict[str, Any]]:
        if len(space) == 0:
            return []
        grid = ParameterGrid({p.name: grid_values(p, self.resolution) for p in space.params})
        return [{k: _to_py(v) for k, v in cand.items()} for cand in grid]


def _distribution(spec: IntegerParam | ContinuousParam):
    if isinstance(spec, IntegerParam):
        return stats.randint(spec.lower, spec.upper + 1)
    if spec.log:
        return stats.loguniform(spec.lower, spec.upper)
    return stats.uniform(loc=spec.lower, scale=spec.upper - spec.lower)


@dataclass(frozen=True)
class RandomSearchStrategy(SearchStrategy):
    """
    Exactly ``n_iter`` independent draws from the space.

    Integers are uniform over their bounds, continuous values uniform or
    log-uniform, categorical values uniform over the declared list. The same
    seed always yields the same candidate list.
    """

    n_iter: int
    seed: int

    name = "random_search"

    def candidates(self, space: SearchSpace) -> List[Dict[str, Any]]:
        if len(space) == 0 or self.n_iter <= 0:
            return []

        rng = np.random.default_rng(self.seed)
        dists = {
            p.name: None if isinstance(p, CategoricalParam) or p.lower == p.upper else _distribution(p)
            for p in space.params
        }

        out: List[Dict[str, Any]] = []
        for _ in range(self.n_iter):
            cand: Dict[str, Any] = {}
            for p in space.params:
                if isinstance(p, CategoricalParam):
                    cand[p.name] = _to_py(p.values[int(rng.integers(len(p.values)))])
                elif dists[p.name] is None:
                    cand[p.name] = p.lower
                else:
                    cand[p.name] = _to_py(dists[p.name].rvs(random_state=rng))
            out.append(cand)
        return out


__all__ = ["GridSearchStrategy", "RandomSearchStrategy"]
