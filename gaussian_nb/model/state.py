# gaussian_nb/model/state.py
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from gaussian_nb.config.classifier_config import VarianceEstimator
from gaussian_nb.engines.class_moments import ClassMoments
from gaussian_nb.utils.errors import InvalidState

_COUNT_MAX = np.iinfo(np.int64).max


@dataclass
class ModelState:
    """
    ModelState

    Layout:
    - means / m2 / variances : (C, D), one row per class
    - priors                 : (C,)
    - class_counts           : (C,) int64

    Invariants (held by the train engines, NOT by direct field writes):
    - variances >= variance floor
    - class_counts >= 0, class_counts.sum() == training_points
    - priors == class_counts / training_points once trained
    """

    means: np.ndarray
    m2: np.ndarray
    variances: np.ndarray
    priors: np.ndarray
    class_counts: np.ndarray
    training_points: int = 0

    @classmethod
    def zeros(cls, dimensionality: int, classes: int, variance_floor: float) -> "ModelState":
        shape = (classes, dimensionality)
        return cls(
            means=np.zeros(shape),
            m2=np.zeros(shape),
            variances=np.full(shape, variance_floor),
            priors=np.zeros(classes),
            class_counts=np.zeros(classes, dtype=np.int64),
            training_points=0,
        )

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------
    @property
    def n_classes(self) -> int:
        return int(self.means.shape[0])

    @property
    def dimensionality(self) -> int:
        return int(self.means.shape[1])

    @property
    def is_trained(self) -> bool:
        return self.training_points > 0

    # ------------------------------------------------------------------
    # Per-class aggregates
    # ------------------------------------------------------------------
    def moments(self, c: int) -> ClassMoments:
        return ClassMoments(
            count=int(self.class_counts[c]),
            mean=self.means[c].copy(),
            m2=self.m2[c].copy(),
        )

    def set_moments(
        self,
        c: int,
        moments: ClassMoments,
        *,
        estimator: VarianceEstimator,
        floor: float,
    ) -> None:
        self.class_counts[c] = moments.count
        self.means[c] = moments.mean
        self.m2[c] = moments.m2
        self.variances[c] = moments.variance(estimator, floor)

    def refresh_priors(self) -> None:
        """
        priors are always derived from the integer counts, never accumulated.
        """
        if self.training_points > 0:
            self.priors = self.class_counts / float(self.training_points)
        else:
            self.priors = np.zeros(self.n_classes)

    def rebuild_m2(self, estimator: VarianceEstimator) -> None:
        """
        Re-derive M2 from variances and counts after variances were replaced
        from outside the train engines.
        """
        divisor = np.maximum(self.class_counts - estimator.ddof, 0).astype(np.float64)
        self.m2 = self.variances * divisor[:, None]

    def reset_counts(self, classes: int, dimensionality: int) -> None:
        """
        Drop the running aggregates after a direct write changed the model's
        shape: counts, M2 and training_points restart at zero so later
        training begins from an unsized history.
        """
        self.class_counts = np.zeros(classes, dtype=np.int64)
        self.m2 = np.zeros((classes, dimensionality))
        self.training_points = 0

    # ------------------------------------------------------------------
    # Bookkeeping guard
    # ------------------------------------------------------------------
    def check_bookkeeping(self, incoming: int = 0) -> None:
        """
        Raise InvalidState when direct writes left the per-class arrays with
        different shapes, when counts are inconsistent, or when adding
        `incoming` points would overflow the count type.
        """
        c, d = self.means.shape
        shapes = {
            "m2": self.m2.shape,
            "variances": self.variances.shape,
            "priors": self.priors.shape,
            "class_counts": self.class_counts.shape,
        }
        expected = {"m2": (c, d), "variances": (c, d), "priors": (c,), "class_counts": (c,)}
        if shapes != expected:
            raise InvalidState(f"inconsistent shapes for means {(c, d)}: {shapes}")

        if self.training_points < 0 or np.any(self.class_counts < 0):
            raise InvalidState(
                f"negative counts: training_points={self.training_points} "
                f"class_counts={self.class_counts.tolist()}"
            )

        total = int(self.class_counts.sum())
        if total != self.training_points:
            raise InvalidState(
                f"class_counts sum {total} != training_points {self.training_points}"
            )

        if incoming < 0 or self.training_points > _COUNT_MAX - incoming:
            raise InvalidState(
                f"merging {incoming} points into {self.training_points} overflows counts"
            )
