from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Optional

import numpy as np
from sklearn.model_selection import train_test_split

from tunekit.contracts.split_configs import SplitCVModel, SplitHoldoutModel, SplitRepeatedCVModel
from tunekit.components.splitters.cv_split import generate_folds
from tunekit.components.splitters.types import Split
from ..interfaces import Splitter


@dataclass
class HoldOutSplitter(Splitter):
    cfg: SplitHoldoutModel
    seed: Optional[int] = None
    stratify: bool = True

    def split(self, X: np.ndarray, y: np.ndarray) -> Iterator[Split]:
        y = np.asarray(y).ravel()
        rows = np.arange(y.shape[0])
        use_strata = self.stratify and self.cfg.stratified
        idx_tr, idx_te = train_test_split(
            rows,
            train_size=self.cfg.train_frac,
            shuffle=self.cfg.shuffle,
            stratify=(y if use_strata else None),
            random_state=(self.seed if self.cfg.shuffle else None),
        )
        yield Split(idx_tr=np.sort(idx_tr), idx_te=np.sort(idx_te))


@dataclass
class KFoldSplitter(Splitter):
    cfg: SplitCVModel
    seed: Optional[int] = None
    stratify: bool = True

    def split(self, X: np.ndarray, y: np.ndarray) -> Iterator[Split]:
        yield from generate_folds(
            X,
            y,
            n_splits=self.cfg.n_splits,
            stratified=(self.stratify and self.cfg.stratified),
            shuffle=self.cfg.shuffle,
            random_state=self.seed,
        )


@dataclass
class RepeatedKFoldSplitter(Splitter):
    cfg: SplitRepeatedCVModel
    seed: Optional[int] = None
    stratify: bool = True

    def split(self, X: np.ndarray, y: np.ndarray) -> Iterator[Split]:
        yield from generate_folds(
            X,
            y,
            n_splits=self.cfg.n_splits,
            n_repeats=self.cfg.n_repeats,
            stratified=(self.stratify and self.cfg.stratified),
            shuffle=True,
            random_state=self.seed,
        )
