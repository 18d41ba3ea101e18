from __future__ import annotations

"""Search-space construction and discretization.

``define_search_space`` turns plain dicts into validated contracts; the
contracts themselves reject malformed domains, so every strategy may assume
well-formed, non-empty domains with unique names.
"""

import logging
from typing import Any, Iterable, List, Mapping, Union

import numpy as np
from pydantic import TypeAdapter, ValidationError

from tunekit.contracts.search_space import (
    CategoricalParam,
    ContinuousParam,
    HyperparameterSpec,
    IntegerParam,
    SearchSpace,
)
from tunekit.errors import InvalidDomainError

logger = logging.getLogger(__name__)

# Grid points per continuous parameter when no resolution is configured.
DEFAULT_RESOLUTION = 10

_SPEC_ADAPTER: TypeAdapter = TypeAdapter(HyperparameterSpec)

SpecLike = Union[IntegerParam, ContinuousParam, CategoricalParam, Mapping[str, Any]]


def _coerce_spec(raw: SpecLike) -> Union[IntegerParam, ContinuousParam, CategoricalParam]:
    if isinstance(raw, (IntegerParam, ContinuousParam, CategoricalParam)):
        return raw
    name = raw.get("name") if isinstance(raw, Mapping) else None
    try:
        return _SPEC_ADAPTER.validate_python(raw)
    except ValidationError as e:
        raise InvalidDomainError(f"Malformed hyperparameter spec {raw!r}: {e}", param_name=name) from e


def define_search_space(specs: Iterable[SpecLike]) -> SearchSpace:
    """Validate hyperparameter specs and bundle them into a :class:`SearchSpace`.

    Specs may be contract instances or plain dicts with a ``kind`` key
    (``"integer"``, ``"continuous"`` or ``"categorical"``).

    Raises
    ------
    InvalidDomainError
        A malformed spec, inverted bounds, an empty categorical domain, a
        non-positive log bound or a duplicated name.
    """
    params = [_coerce_spec(raw) for raw in specs]
    space = SearchSpace(params=tuple(params))
    logger.debug("Defined search space over %s", space.names)
    return space


def grid_values(
    spec: Union[IntegerParam, ContinuousParam, CategoricalParam],
    resolution: int | None = None,
) -> List[Any]:
    """Finite, ordered values for one hyperparameter.

    - integer: every value in ``[lower, upper]``; with ``resolution`` that many
      evenly spaced integers (duplicates removed).
    - continuous: ``resolution`` (default 10) points, linear or geometric.
    - categorical: the declared values.
    """
    if isinstance(spec, CategoricalParam):
        return list(spec.values)

    if isinstance(spec, IntegerParam):
        if resolution is None:
            return list(range(spec.lower, spec.upper + 1))
        pts = np.round(np.linspace(spec.lower, spec.upper, resolution))
        return [int(v) for v in np.unique(pts.astype(int))]

    n = resolution or DEFAULT_RESOLUTION
    if spec.lower == spec.upper:
        return [float(spec.lower)]
    spaced = np.geomspace if spec.log else np.linspace
    return [float(v) for v in spaced(spec.lower, spec.upper, n)]


__all__ = ["DEFAULT_RESOLUTION", "define_search_space", "grid_values"]
