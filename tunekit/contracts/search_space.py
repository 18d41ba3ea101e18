from __future__ import annotations

"""Hyperparameter search space contracts.

A search space is an ordered, immutable set of per-hyperparameter domain
declarations. The contracts carry their own domain invariants: a param with
inverted bounds or no values, or a space with a repeated name, cannot be
constructed and raises :class:`~tunekit.errors.InvalidDomainError`.
"""

import math
from typing import Annotated, Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from tunekit.errors import InvalidDomainError

from .choices import CategoricalValue


def _check_name(name: str) -> None:
    if not name:
        raise InvalidDomainError("Hyperparameter name must be a non-empty string", param_name=name)


def _check_bounds(name: str, lower: float, upper: float) -> None:
    if lower > upper:
        raise InvalidDomainError(
            f"{name}: lower bound {lower} exceeds upper bound {upper}",
            param_name=name,
        )


class IntegerParam(BaseModel):
    """Integer hyperparameter with inclusive bounds."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["integer"] = "integer"
    name: str
    lower: int
    upper: int

    @model_validator(mode="after")
    def _check_domain(self) -> "IntegerParam":
        _check_name(self.name)
        _check_bounds(self.name, self.lower, self.upper)
        return self


class ContinuousParam(BaseModel):
    """Real-valued hyperparameter with inclusive bounds.

    With ``log=True`` values are spread geometrically (grid) or drawn
    log-uniformly (random search); both bounds must then be positive.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["continuous"] = "continuous"
    name: str
    lower: float
    upper: float
    log: bool = False

    @model_validator(mode="after")
    def _check_domain(self) -> "ContinuousParam":
        _check_name(self.name)
        if not (math.isfinite(self.lower) and math.isfinite(self.upper)):
            raise InvalidDomainError(f"{self.name}: bounds must be finite", param_name=self.name)
        if self.log and self.lower <= 0:
            raise InvalidDomainError(
                f"{self.name}: log-scaled domain needs a positive lower bound; got {self.lower}",
                param_name=self.name,
            )
        _check_bounds(self.name, self.lower, self.upper)
        return self


class CategoricalParam(BaseModel):
    """Hyperparameter drawn from an explicit list of values."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["categorical"] = "categorical"
    name: str
    values: Tuple[CategoricalValue, ...]

    @model_validator(mode="after")
    def _check_domain(self) -> "CategoricalParam":
        _check_name(self.name)
        if len(self.values) == 0:
            raise InvalidDomainError(f"{self.name}: categorical domain has no values", param_name=self.name)
        return self


HyperparameterSpec = Annotated[
    Union[IntegerParam, ContinuousParam, CategoricalParam],
    Field(discriminator="kind"),
]


class SearchSpace(BaseModel):
    """Validated, ordered collection of hyperparameter specs."""

    model_config = ConfigDict(frozen=True)

    params: Tuple[HyperparameterSpec, ...] = ()

    @model_validator(mode="after")
    def _check_unique_names(self) -> "SearchSpace":
        seen: set[str] = set()
        for p in self.params:
            if p.name in seen:
                raise InvalidDomainError(f"Duplicate hyperparameter name: {p.name!r}", param_name=p.name)
            seen.add(p.name)
        return self

    @property
    def names(self) -> List[str]:
        return [p.name for p in self.params]

    def __len__(self) -> int:
        return len(self.params)

    def grid(self, resolution: Optional[int] = None) -> Dict[str, List[Any]]:
        """Discretized value list per parameter, in declaration order."""
        from tunekit.components.tuning.space import grid_values

        return {p.name: grid_values(p, resolution) for p in self.params}

    def grid_size(self, resolution: Optional[int] = None) -> int:
        """Number of grid-search candidates (0 for an empty space)."""
        if not self.params:
            return 0
        size = 1
        for values in self.grid(resolution).values():
            size *= len(values)
        return size


__all__ = [
    "IntegerParam",
    "ContinuousParam",
    "CategoricalParam",
    "HyperparameterSpec",
    "SearchSpace",
]
