# gaussian_nb/dataset.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

import numpy as np
import pandas as pd

from gaussian_nb import logs
from gaussian_nb.config.dataset_config import FeatureLabelConfig
from gaussian_nb.utils.arrays import as_labels, as_matrix
from gaussian_nb.utils.errors import DimensionMismatch


@dataclass(frozen=True)
class Dataset:
    """
    Dataset

    Ordered (N, D) points paired with N integer labels.
    Row order is preserved by every operation.
    """

    data: np.ndarray
    labels: np.ndarray

    def __post_init__(self):
        X = as_matrix(self.data)
        y = as_labels(self.labels)
        if X.shape[0] != y.shape[0]:
            raise DimensionMismatch(f"{y.shape[0]} labels for {X.shape[0]} points")
        object.__setattr__(self, "data", X)
        object.__setattr__(self, "labels", y)

    @property
    def n_points(self) -> int:
        return int(self.data.shape[0])

    @property
    def dimensionality(self) -> int:
        return int(self.data.shape[1])

    def __len__(self) -> int:
        return self.n_points

    # ------------------------------------------------------------------
    # Construction from pandas
    # ------------------------------------------------------------------
    @classmethod
    def from_frame(cls, frame: pd.DataFrame, cfg: FeatureLabelConfig) -> "Dataset":
        """
        Select feature / label columns and sanitize.

        - inf -> NaN on features and label
        - drop_na: rows with any NaN are removed
        - missing columns raise KeyError (pandas)
        """
        X = frame[cfg.feature_columns].astype(np.float64)
        y = frame[cfg.label_column]

        X = X.replace([np.inf, -np.inf], np.nan)
        y = y.replace([np.inf, -np.inf], np.nan)

        if cfg.drop_na:
            mask = X.notna().all(axis=1) & y.notna()
            dropped = int((~mask).sum())
            if dropped:
                logs.info(f"[Dataset] dropped {dropped} incomplete rows")
            X = X.loc[mask]
            y = y.loc[mask]

        return cls(data=X.to_numpy(), labels=y.to_numpy())

    # ------------------------------------------------------------------
    # Slicing
    # ------------------------------------------------------------------
    def batches(self, size: int) -> Iterator["Dataset"]:
        """
        Consecutive blocks of at most `size` rows.
        """
        if size <= 0:
            raise ValueError("batch size must be positive")
        for lo in range(0, self.n_points, size):
            yield Dataset(self.data[lo:lo + size], self.labels[lo:lo + size])

    def split(self, indices: Any) -> list["Dataset"]:
        """
        Split at the given row indices (np.split semantics).
        """
        return [
            Dataset(X, y)
            for X, y in zip(
                np.split(self.data, indices),
                np.split(self.labels, indices),
            )
        ]
