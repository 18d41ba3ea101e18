from __future__ import annotations

"""Splitter return contracts.

Splitters yield a *single, stable* fold payload shape: row indices into the
original X/y plus the fold's position in its partition. Arrays are sliced by
the consumer, so one set of partitions can be shared by every candidate of a
search.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Split:
    """A single train/test split (fold).

    Notes
    -----
    - ``fold`` is the 0-based fold index within its partition.
    - ``repetition`` is the 0-based partition index (always 0 for holdout
      and plain k-fold).
    """

    idx_tr: np.ndarray
    idx_te: np.ndarray
    fold: int = 0
    repetition: int = 0
