from __future__ import annotations

"""Row alignment against a training schema.

Incoming rows must carry exactly the training features (by name, any order);
the target column is optional for prediction and required for evaluation.
Nothing is dropped, imputed or coerced silently.
"""

from typing import Any, Mapping, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from tunekit.errors import SchemaMismatchError

RowsLike = Union[pd.DataFrame, pd.Series, Mapping[str, Any]]


def _as_frame(rows: RowsLike) -> pd.DataFrame:
    if isinstance(rows, pd.DataFrame):
        frame = rows.copy()
    elif isinstance(rows, pd.Series):
        frame = rows.to_frame().T.reset_index(drop=True).infer_objects()
    elif isinstance(rows, Mapping):
        frame = pd.DataFrame([dict(rows)])
    else:
        raise SchemaMismatchError(
            f"Rows must be a DataFrame, Series or mapping; got {type(rows).__name__}"
        )
    frame.columns = [str(c) for c in frame.columns]
    return frame


def align_rows(
    rows: RowsLike,
    feature_names: Sequence[str],
    *,
    target: str,
    require_target: bool = False,
) -> Tuple[np.ndarray, Optional[np.ndarray]]:
    """Return ``(X, y)`` ordered like ``feature_names``; ``y`` is None without a target column.

    Raises
    ------
    SchemaMismatchError
        Missing or unexpected feature columns, duplicated columns, a missing
        target when ``require_target`` is set, non-numeric or missing values.
    """
    frame = _as_frame(rows)
    cols = list(frame.columns)

    dupes = sorted({c for c in cols if cols.count(c) > 1})
    if dupes:
        raise SchemaMismatchError(f"Duplicated columns: {dupes}", unexpected=dupes)

    expected = list(feature_names)
    missing = [f for f in expected if f not in cols]
    unexpected = [c for c in cols if c not in expected and c != target]
    if require_target and target not in cols:
        missing.append(target)
    if missing or unexpected:
        raise SchemaMismatchError(
            f"Rows do not match the training schema (missing={missing}, unexpected={unexpected})",
            missing=missing,
            unexpected=unexpected,
        )
    if frame.shape[0] == 0:
        raise SchemaMismatchError("No rows to predict")

    X_df = frame[expected]
    non_numeric = [c for c in expected if not pd.api.types.is_numeric_dtype(X_df[c])]
    if non_numeric:
        raise SchemaMismatchError(f"Non-numeric feature columns: {non_numeric}", unexpected=non_numeric)
    if X_df.isna().to_numpy().any():
        raise SchemaMismatchError("Rows contain missing feature values")

    y = frame[target].to_numpy() if target in cols else None
    return X_df.to_numpy(dtype=float), y


__all__ = ["align_rows"]
