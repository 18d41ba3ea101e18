"""Pytest fixtures for the tunekit test suite."""

from typing import List, Optional, Tuple

import numpy as np
import pandas as pd
import pytest
from sklearn.datasets import make_classification, make_regression

from tunekit.core.task import Task
from tunekit.extras.datasets import load_wine_task


def _frame(X: np.ndarray, y: np.ndarray) -> pd.DataFrame:
    df = pd.DataFrame(X, columns=[f"f{i}" for i in range(X.shape[1])])
    df["target"] = y
    return df


@pytest.fixture(scope="session")
def wine_task() -> Task:
    return load_wine_task()


@pytest.fixture
def clf_task() -> Task:
    """Binary classification task, 120 rows x 5 features."""
    X, y = make_classification(
        n_samples=120, n_features=5, n_informative=3, n_redundant=0, random_state=0,
    )
    return Task(data=_frame(X, y), target="target", problem="classification", id="clf")


@pytest.fixture
def reg_task() -> Task:
    """Regression task, 100 rows x 4 features."""
    X, y = make_regression(
        n_samples=100, n_features=4, n_informative=3, noise=0.5, random_state=0,
    )
    return Task(data=_frame(X, y), target="target", problem="regression", id="reg")


class RecordingProgress:
    def __init__(self) -> None:
        self.events: List[Tuple[str, Optional[int]]] = []

    def init(self, *, total: int, label: Optional[str] = None) -> None:
        self.events.append(("init", total))

    def update(self, *, current: int, label: Optional[str] = None) -> None:
        self.events.append(("update", current))

    def finalize(self, *, label: Optional[str] = None) -> None:
        self.events.append(("finalize", None))


@pytest.fixture
def progress() -> RecordingProgress:
    return RecordingProgress()
