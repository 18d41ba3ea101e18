from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class SplitHoldoutModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: Literal["holdout"] = "holdout"
    train_frac: float = Field(default=2.0 / 3.0, gt=0.0, lt=1.0)
    stratified: bool = False
    shuffle: bool = True


class SplitCVModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: Literal["kfold"] = "kfold"
    n_splits: int = Field(default=10, ge=2)
    stratified: bool = False
    shuffle: bool = True


class SplitRepeatedCVModel(BaseModel):
    """Repeated k-fold: ``n_repeats`` independent k-fold partitions (always shuffled)."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["repeated_kfold"] = "repeated_kfold"
    n_splits: int = Field(default=10, ge=2)
    n_repeats: int = Field(default=10, ge=1)
    stratified: bool = False


SplitConfig = Annotated[
    Union[SplitHoldoutModel, SplitCVModel, SplitRepeatedCVModel],
    Field(discriminator="mode"),
]
