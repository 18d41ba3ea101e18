from __future__ import annotations
import numpy as np
from sklearn.model_selection import KFold, RepeatedKFold, RepeatedStratifiedKFold, StratifiedKFold
from typing import Iterator, Union

from tunekit.components.splitters.types import Split


def generate_folds(
    X: np.ndarray,
    y: np.ndarray,
    n_splits: int = 10,
    n_repeats: int = 1,
    stratified: bool = False,
    shuffle: bool = True,
    random_state: Union[int, None] = None,
) -> Iterator[Split]:
    """Yield :class:`Split` for each fold of each repetition.

    ``n_repeats > 1`` draws independent shuffled partitions; the unshuffled
    variant is only meaningful for a single partition.
    """
    X = np.asarray(X)
    y = np.asarray(y).ravel()
    if X.shape[0] != y.shape[0]:
        raise ValueError(f"X and y length mismatch: {X.shape[0]} vs {y.shape[0]}")

    if n_repeats > 1:
        splitter_cls = RepeatedStratifiedKFold if stratified else RepeatedKFold
        splitter = splitter_cls(
            n_splits=n_splits,
            n_repeats=n_repeats,
            random_state=random_state,
        )
    else:
        splitter_cls = StratifiedKFold if stratified else KFold
        splitter = splitter_cls(
            n_splits=n_splits,
            shuffle=shuffle,
            random_state=(random_state if shuffle else None),
        )

    for i, (train_idx, test_idx) in enumerate(splitter.split(X, y)):
        yield Split(
            idx_tr=np.asarray(train_idx, dtype=int),
            idx_te=np.asarray(test_idx, dtype=int),
            fold=i % n_splits,
            repetition=i // n_splits,
        )
