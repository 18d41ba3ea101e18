from __future__ import annotations

from typing import Optional

from tunekit.components.models.builders import (
    GradientBoostingBuilder,
    GradientBoostingRegressorBuilder,
    KNNBuilder,
    KNNRegressorBuilder,
    LDABuilder,
    QDABuilder,
    RandomForestBuilder,
    RandomForestRegressorBuilder,
)
from tunekit.contracts.model_configs import (
    ForestConfig,
    GradientBoostingConfig,
    GradientBoostingRegressorConfig,
    KNNConfig,
    KNNRegressorConfig,
    LDAConfig,
    QDAConfig,
    RandomForestRegressorConfig,
)
from tunekit.registries.models import register_model_builder


# -----------------------------
# Classification
# -----------------------------

@register_model_builder(KNNConfig)
def _knn(cfg: KNNConfig, seed: Optional[int]):
    return KNNBuilder(cfg=cfg)


@register_model_builder(ForestConfig)
def _forest(cfg: ForestConfig, seed: Optional[int]):
    return RandomForestBuilder(cfg=cfg, seed=seed)


@register_model_builder(GradientBoostingConfig)
def _gboost(cfg: GradientBoostingConfig, seed: Optional[int]):
    return GradientBoostingBuilder(cfg=cfg, seed=seed)


@register_model_builder(LDAConfig)
def _lda(cfg: LDAConfig, seed: Optional[int]):
    return LDABuilder(cfg=cfg)


@register_model_builder(QDAConfig)
def _qda(cfg: QDAConfig, seed: Optional[int]):
    return QDABuilder(cfg=cfg)


# -----------------------------
# Regression
# -----------------------------

@register_model_builder(KNNRegressorConfig)
def _knnreg(cfg: KNNRegressorConfig, seed: Optional[int]):
    return KNNRegressorBuilder(cfg=cfg)


@register_model_builder(RandomForestRegressorConfig)
def _rfreg(cfg: RandomForestRegressorConfig, seed: Optional[int]):
    return RandomForestRegressorBuilder(cfg=cfg, seed=seed)


@register_model_builder(GradientBoostingRegressorConfig)
def _gboostreg(cfg: GradientBoostingRegressorConfig, seed: Optional[int]):
    return GradientBoostingRegressorBuilder(cfg=cfg, seed=seed)
