from __future__ import annotations

from typing import ClassVar, List, Literal, Optional, Union

from pydantic import BaseModel

from ..choices import LDASolver


class LDAConfig(BaseModel):
    algo: Literal["lda"] = "lda"

    task: ClassVar[str] = "classification"
    family: ClassVar[str] = "discriminant"

    solver: LDASolver = "svd"
    # Only valid with the "lsqr" and "eigen" solvers.
    shrinkage: Optional[Union[float, Literal["auto"]]] = None
    priors: Optional[List[float]] = None
    n_components: Optional[int] = None
    store_covariance: bool = False
    tol: float = 1e-4


class QDAConfig(BaseModel):
    algo: Literal["qda"] = "qda"

    task: ClassVar[str] = "classification"
    family: ClassVar[str] = "discriminant"

    priors: Optional[List[float]] = None
    reg_param: float = 0.0
    store_covariance: bool = False
    tol: float = 1e-4
