# gaussian_nb/model/parameters.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

import numpy as np

from gaussian_nb.utils.errors import InvalidParameters


@dataclass(frozen=True)
class ModelParameters:
    """
    ModelParameters

    Flat, persistence-agnostic parameter set of a trained model.
    Serialization format is owned by the caller; to_dict() only
    turns arrays into plain lists.
    """

    means: np.ndarray
    variances: np.ndarray
    priors: np.ndarray
    training_points: int
    class_counts: np.ndarray

    def to_dict(self) -> Dict[str, Any]:
        return {
            "means": self.means.tolist(),
            "variances": self.variances.tolist(),
            "priors": self.priors.tolist(),
            "training_points": int(self.training_points),
            "class_counts": self.class_counts.tolist(),
        }

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "ModelParameters":
        try:
            return cls(
                means=np.asarray(raw["means"], dtype=np.float64),
                variances=np.asarray(raw["variances"], dtype=np.float64),
                priors=np.asarray(raw["priors"], dtype=np.float64),
                training_points=int(raw["training_points"]),
                class_counts=np.asarray(raw["class_counts"], dtype=np.int64),
            )
        except KeyError as e:
            raise InvalidParameters(f"missing parameter {e.args[0]!r}") from e

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    def validate(self, variance_floor: float, atol: float = 1e-9) -> None:
        """
        Re-check every model invariant. Raises InvalidParameters.
        """
        if self.means.ndim != 2:
            raise InvalidParameters(f"means must be (C, D), got shape {self.means.shape}")

        C, _ = self.means.shape

        if self.variances.shape != self.means.shape:
            raise InvalidParameters(
                f"variances shape {self.variances.shape} != means shape {self.means.shape}"
            )
        if self.priors.shape != (C,):
            raise InvalidParameters(f"priors shape {self.priors.shape} != ({C},)")
        if self.class_counts.shape != (C,):
            raise InvalidParameters(f"class_counts shape {self.class_counts.shape} != ({C},)")

        for name in ("means", "variances", "priors"):
            if not np.all(np.isfinite(getattr(self, name))):
                raise InvalidParameters(f"{name} contains NaN or Inf")

        if np.any(self.variances < variance_floor):
            raise InvalidParameters(f"variances must be >= {variance_floor}")

        if np.any(self.priors < 0) or np.any(self.priors > 1):
            raise InvalidParameters("priors must lie in [0, 1]")

        if self.training_points < 0 or np.any(self.class_counts < 0):
            raise InvalidParameters("counts must be non-negative")

        if int(self.class_counts.sum()) != self.training_points:
            raise InvalidParameters(
                f"class_counts sum {int(self.class_counts.sum())} "
                f"!= training_points {self.training_points}"
            )

        if self.training_points > 0 and abs(float(self.priors.sum()) - 1.0) > atol:
            raise InvalidParameters(f"priors sum to {float(self.priors.sum())}, expected 1")
