from __future__ import annotations
from typing import Any, Dict, Iterator, List, Protocol

import numpy as np

from tunekit.components.splitters.types import Split
from tunekit.contracts.search_space import SearchSpace


class Splitter(Protocol):
    def split(
        self,
        X: np.ndarray,
        y: np.ndarray,
    ) -> Iterator[Split]:
        """Yield a sequence of train/test splits.

        Implementations must yield :class:`tunekit.components.splitters.types.Split`.
        """
        ...


class ModelBuilder(Protocol):
    def make_estimator(self) -> Any:
        """Return a configured, unfitted estimator (classifier/regressor)."""
        ...


class SearchStrategy(Protocol):
    """
    Produces the candidate assignments of a search space. Candidates are
    plain dicts of JSON-friendly Python scalars, in evaluation order.
    """
    def candidates(self, space: SearchSpace) -> List[Dict[str, Any]]:
        ...


class Evaluator(Protocol):
    def measures(self, y_true: np.ndarray, y_pred: np.ndarray) -> Dict[str, float]:
        """Return every measure of the evaluator's problem kind."""
        ...

    def loss(self, y_true: np.ndarray, y_pred: np.ndarray) -> float:
        """Return the scalar loss that tuning minimizes."""
        ...
