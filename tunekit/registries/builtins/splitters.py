from __future__ import annotations

from typing import Optional

from tunekit.components.splitters.splitters import (
    HoldOutSplitter,
    KFoldSplitter,
    RepeatedKFoldSplitter,
)
from tunekit.contracts.split_configs import SplitCVModel, SplitHoldoutModel, SplitRepeatedCVModel
from tunekit.registries.splitters import register_splitter


@register_splitter(SplitHoldoutModel)
def _make_holdout(cfg: SplitHoldoutModel, seed: Optional[int], stratify: bool):
    return HoldOutSplitter(cfg=cfg, seed=seed, stratify=stratify)


@register_splitter(SplitCVModel)
def _make_kfold(cfg: SplitCVModel, seed: Optional[int], stratify: bool):
    return KFoldSplitter(cfg=cfg, seed=seed, stratify=stratify)


@register_splitter(SplitRepeatedCVModel)
def _make_repeated_kfold(cfg: SplitRepeatedCVModel, seed: Optional[int], stratify: bool):
    return RepeatedKFoldSplitter(cfg=cfg, seed=seed, stratify=stratify)
