"""Prediction components (compute layer)."""

from .predicting import predict_labels
from .schema import align_rows

__all__ = ["predict_labels", "align_rows"]
