# gaussian_nb/engines/moment_estimate_engine.py
from __future__ import annotations

from typing import Dict, List

import numpy as np

from gaussian_nb.config.classifier_config import VarianceMode
from gaussian_nb.engines.class_moments import ClassMoments


class MomentEstimateEngine:
    """
    MomentEstimateEngine

    Responsibility:
    - Split one block of labelled points by class
    - Compute each class's ClassMoments over that block only

    Contract:
    - X is (N, D), y is (N,) int64, already validated by the caller
    - every label lies in [0, n_classes)
    """

    def __init__(self, mode: VarianceMode = VarianceMode.TWO_PASS):
        self.mode = mode

    def execute(
        self,
        X: np.ndarray,
        y: np.ndarray,
        n_classes: int,
    ) -> List[ClassMoments]:
        """
        One aggregate per declared class; absent classes get an empty one.
        """
        present = self.execute_present(X, y)
        return [
            present.get(c, ClassMoments.empty(X.shape[1]))
            for c in range(n_classes)
        ]

    def execute_present(
        self,
        X: np.ndarray,
        y: np.ndarray,
    ) -> Dict[int, ClassMoments]:
        """
        Aggregates for the classes that actually occur in the block.
        """
        if y.size == 0:
            return {}

        # stable sort keeps within-class order for the online path
        order = np.argsort(y, kind="stable")
        y_sorted = y[order]
        classes, starts = np.unique(y_sorted, return_index=True)
        bounds = list(starts[1:]) + [len(y_sorted)]

        out: Dict[int, ClassMoments] = {}
        for c, lo, hi in zip(classes, starts, bounds):
            rows = X[order[lo:hi]]
            out[int(c)] = ClassMoments.from_block(rows, self.mode)
        return out
