from __future__ import annotations

from tunekit.contracts.tuning_configs import GridSearchConfig, RandomizedSearchConfig, SearchConfig
from tunekit.runtime.random.rng import RngManager
from tunekit.components.interfaces import SearchStrategy
from tunekit.components.tuning.search import GridSearchStrategy, RandomSearchStrategy


def make_search_strategy(cfg: SearchConfig, rngm: RngManager, *, stream: str = "tuning") -> SearchStrategy:
    """
    Factory for candidate-generating search strategies.

    Random search draws from ``cfg.random_state`` when set, otherwise from a
    named child stream of ``rngm``.
    """
    if isinstance(cfg, GridSearchConfig):
        return GridSearchStrategy(resolution=cfg.resolution)
    if isinstance(cfg, RandomizedSearchConfig):
        seed = cfg.random_state if cfg.random_state is not None else rngm.child_seed(f"{stream}/sampler")
        return RandomSearchStrategy(n_iter=cfg.n_iter, seed=int(seed))
    raise TypeError(f"Unknown search config: {type(cfg).__name__}")
