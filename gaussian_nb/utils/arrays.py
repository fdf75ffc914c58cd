# gaussian_nb/utils/arrays.py
from __future__ import annotations

from typing import Any, Tuple

import numpy as np
import pandas as pd

from gaussian_nb.utils.errors import DimensionMismatch, LabelOutOfRange


def as_float_array(x: Any) -> np.ndarray:
    """
    DataFrame / Series / sequence -> float64 ndarray (no copy when possible).
    """
    if isinstance(x, (pd.DataFrame, pd.Series)):
        x = x.to_numpy()
    return np.asarray(x, dtype=np.float64)


def as_matrix(data: Any) -> np.ndarray:
    """
    Coerce to an (N, D) float matrix. One row per point.
    """
    X = as_float_array(data)
    if X.ndim != 2:
        raise DimensionMismatch(f"expected 2-D data (N, D), got ndim={X.ndim}")
    return X


def as_point_or_matrix(x: Any) -> Tuple[np.ndarray, bool]:
    """
    Returns (array, is_single_point).
    """
    X = as_float_array(x)
    if X.ndim == 1:
        return X, True
    if X.ndim == 2:
        return X, False
    raise DimensionMismatch(f"expected a point (D,) or data (N, D), got ndim={X.ndim}")


def as_labels(labels: Any) -> np.ndarray:
    """
    Coerce to an int64 label vector.

    Integral floats (e.g. 1.0 coming out of a pandas column) are accepted;
    anything else is rejected rather than truncated.
    """
    if isinstance(labels, (pd.Series, pd.DataFrame)):
        labels = labels.to_numpy()
    y = np.asarray(labels)

    if y.ndim != 1:
        raise DimensionMismatch(f"labels must be 1-D, got ndim={y.ndim}")

    if y.size == 0:
        return y.astype(np.int64)

    if np.issubdtype(y.dtype, np.integer):
        return y.astype(np.int64, copy=False)

    if np.issubdtype(y.dtype, np.floating):
        if not np.all(np.isfinite(y)) or not np.all(y == np.floor(y)):
            raise LabelOutOfRange("labels must be integral class indices")
        return y.astype(np.int64)

    raise LabelOutOfRange(f"labels must be integers, got dtype={y.dtype}")


def check_width(X: np.ndarray, dimensionality: int) -> None:
    width = X.shape[-1]
    if width != dimensionality:
        raise DimensionMismatch(
            f"feature count {width} != model dimensionality {dimensionality}"
        )


def check_labels(y: np.ndarray, n_classes: int) -> None:
    if y.size == 0:
        return
    lo, hi = int(y.min()), int(y.max())
    if lo < 0 or hi >= n_classes:
        bad = lo if lo < 0 else hi
        raise LabelOutOfRange(
            f"label {bad} outside [0, {n_classes})"
        )
