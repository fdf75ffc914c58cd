# gaussian_nb/engines/decision_engine.py
from __future__ import annotations

from typing import Tuple

import numpy as np
from scipy.special import logsumexp


class DecisionEngine:
    """
    DecisionEngine

    Turns log-likelihoods (last axis = classes) into a MAP label and a
    normalized class distribution.

    - argmax ties resolve to the lowest class index (np.argmax scans left to right)
    - p_c = exp(ll_c - logsumexp(ll)); logsumexp shifts by the row max
      before exponentiating
    - a row where every class is -inf (untrained model) gets a uniform
      distribution instead of NaN
    """

    @staticmethod
    def decide(ll: np.ndarray) -> np.ndarray | int:
        labels = np.argmax(ll, axis=-1)
        if ll.ndim == 1:
            return int(labels)
        return labels.astype(np.int64)

    @staticmethod
    def normalize(ll: np.ndarray) -> np.ndarray:
        with np.errstate(divide="ignore", invalid="ignore"):
            lse = logsumexp(ll, axis=-1, keepdims=True)

        dead = ~np.isfinite(lse)
        with np.errstate(invalid="ignore"):
            probs = np.exp(ll - np.where(dead, 0.0, lse))

        if np.any(dead):
            n_classes = ll.shape[-1]
            probs = np.where(dead, 1.0 / n_classes, probs)

        return np.clip(probs, 0.0, 1.0)

    def execute(self, ll: np.ndarray) -> Tuple[np.ndarray | int, np.ndarray]:
        return self.decide(ll), self.normalize(ll)
