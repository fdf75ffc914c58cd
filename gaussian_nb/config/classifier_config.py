# gaussian_nb/config/classifier_config.py
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class VarianceMode(str, Enum):
    """
    How the per-class sum of squared deviations (M2) of a block is computed.

    TWO_PASS : mean first, then squared deviations from that mean.
               Vectorized and the cheaper of the two.
    ONLINE   : Welford update point by point in a single pass.
               Slower, but keeps precision when |mean| >> std.

    Both produce the same statistics up to floating tolerance.
    """

    TWO_PASS = "two_pass"
    ONLINE = "online"


class VarianceEstimator(str, Enum):
    UNBIASED = "unbiased"  # M2 / (n - 1)
    BIASED = "biased"  # M2 / n

    @property
    def ddof(self) -> int:
        return 1 if self is VarianceEstimator.UNBIASED else 0


class ClassifierConfig(BaseModel):
    """
    ClassifierConfig

    variance_floor is the smallest variance the model will ever hold;
    zero-variance features and empty classes are regularized to it.
    """

    variance_mode: VarianceMode = VarianceMode.TWO_PASS
    variance_estimator: VarianceEstimator = VarianceEstimator.UNBIASED
    variance_floor: float = Field(default=1e-9, gt=0)
