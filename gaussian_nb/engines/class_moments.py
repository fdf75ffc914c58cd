# gaussian_nb/engines/class_moments.py
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from gaussian_nb.config.classifier_config import VarianceEstimator, VarianceMode


@dataclass(frozen=True)
class ClassMoments:
    """
    Running aggregate of one class: (count, mean, M2).

    M2 is the sum of squared deviations from the mean and is kept unfloored,
    so push / merge stay exact whatever floor the model applies on top.

    All three update paths produce the same aggregate for the same multiset:
        from_block(points)                           (two-pass or online)
        empty().push(p0).push(p1)...                 (Welford)
        from_block(a).merge(from_block(b))           (Chan et al. parallel merge)
    """

    count: int
    mean: np.ndarray
    m2: np.ndarray

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------
    @classmethod
    def empty(cls, dimensionality: int) -> "ClassMoments":
        return cls(
            count=0,
            mean=np.zeros(dimensionality),
            m2=np.zeros(dimensionality),
        )

    @classmethod
    def from_block(
        cls,
        points: np.ndarray,
        mode: VarianceMode = VarianceMode.TWO_PASS,
    ) -> "ClassMoments":
        """
        points: (n, D) rows of a single class.
        """
        n, d = points.shape
        if n == 0:
            return cls.empty(d)

        if mode is VarianceMode.ONLINE:
            acc = cls.empty(d)
            for p in points:
                acc = acc.push(p)
            return acc

        mean = points.mean(axis=0)
        dev = points - mean
        return cls(count=n, mean=mean, m2=np.einsum("ij,ij->j", dev, dev))

    # ------------------------------------------------------------------
    # Updates (return new aggregates)
    # ------------------------------------------------------------------
    def push(self, point: np.ndarray) -> "ClassMoments":
        """
        Welford single-point update.
        """
        n = self.count + 1
        delta = point - self.mean
        mean = self.mean + delta / n
        delta2 = point - mean
        return ClassMoments(count=n, mean=mean, m2=self.m2 + delta * delta2)

    def merge(self, other: "ClassMoments") -> "ClassMoments":
        """
        n      = n_a + n_b
        mean   = (n_a * mean_a + n_b * mean_b) / n
        M2     = M2_a + M2_b + (mean_a - mean_b)^2 * n_a * n_b / n
        """
        if other.count == 0:
            return self
        if self.count == 0:
            return other

        n_a, n_b = float(self.count), float(other.count)
        n = n_a + n_b
        diff = self.mean - other.mean

        mean = (n_a * self.mean + n_b * other.mean) / n
        m2 = self.m2 + other.m2 + diff * diff * (n_a * n_b / n)

        return ClassMoments(count=self.count + other.count, mean=mean, m2=m2)

    # ------------------------------------------------------------------
    # Derived
    # ------------------------------------------------------------------
    def variance(
        self,
        estimator: VarianceEstimator = VarianceEstimator.UNBIASED,
        floor: float = 0.0,
    ) -> np.ndarray:
        """
        M2 / (n - ddof), floored. A non-positive divisor means "no spread
        observed yet" and yields the floor.
        """
        divisor = self.count - estimator.ddof
        if divisor <= 0:
            return np.full_like(self.m2, floor)
        return np.maximum(self.m2 / divisor, floor)
