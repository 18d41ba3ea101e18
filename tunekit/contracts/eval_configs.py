from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from .choices import MeasureName


class EvalModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    # None selects the problem's default ("mse" / "mmce").
    measure: Optional[MeasureName] = None
    seed: Optional[int] = None
