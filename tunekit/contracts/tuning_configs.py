from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class GridSearchConfig(BaseModel):
    """
    Exhaustive search over the discretized search space.
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["grid_search"] = "grid_search"
    # Points per continuous parameter. Integer parameters enumerate every value
    # in their bounds unless a resolution is given.
    resolution: Optional[int] = Field(default=None, ge=1)
    n_jobs: Optional[int] = None


class RandomizedSearchConfig(BaseModel):
    """
    Random sampling of a fixed number of assignments from the search space.
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["random_search"] = "random_search"
    n_iter: int = 20
    n_jobs: Optional[int] = None
    random_state: Optional[int] = None


SearchConfig = Annotated[
    Union[GridSearchConfig, RandomizedSearchConfig],
    Field(discriminator="kind"),
]
