from __future__ import annotations

from typing import Annotated, Union

from pydantic import Field

from .discriminant import LDAConfig, QDAConfig
from .neighbors import KNNConfig, KNNRegressorConfig
from .trees import (
    ForestConfig,
    GradientBoostingConfig,
    GradientBoostingRegressorConfig,
    RandomForestRegressorConfig,
)


ModelConfig = Annotated[
    Union[
        KNNConfig,
        KNNRegressorConfig,
        ForestConfig,
        RandomForestRegressorConfig,
        GradientBoostingConfig,
        GradientBoostingRegressorConfig,
        LDAConfig,
        QDAConfig,
    ],
    Field(discriminator="algo"),
]


__all__ = [
    "ModelConfig",
    "KNNConfig",
    "KNNRegressorConfig",
    "ForestConfig",
    "RandomForestRegressorConfig",
    "GradientBoostingConfig",
    "GradientBoostingRegressorConfig",
    "LDAConfig",
    "QDAConfig",
]
