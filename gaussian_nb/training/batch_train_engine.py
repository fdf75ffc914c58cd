# gaussian_nb/training/batch_train_engine.py
from __future__ import annotations

import numpy as np

from gaussian_nb.model.state import ModelState
from gaussian_nb.training.model_train_engine import ModelTrainEngine


class BatchTrainEngine(ModelTrainEngine):
    """
    BatchTrainEngine (non-incremental)

    Semantics:
    - the existing parameters are discarded
    - every declared class is re-estimated from X / y alone
    - a class without points: mean 0, variance = floor, prior 0
    - training_points = N
    """

    def train(
        self,
        *,
        state: ModelState,
        X: np.ndarray,
        y: np.ndarray,
    ) -> ModelState:
        fresh = ModelState.zeros(
            state.dimensionality, state.n_classes, self.cfg.variance_floor
        )

        for c, moments in enumerate(self.estimator.execute(X, y, state.n_classes)):
            fresh.set_moments(
                c,
                moments,
                estimator=self.cfg.variance_estimator,
                floor=self.cfg.variance_floor,
            )

        fresh.training_points = int(len(y))
        fresh.refresh_priors()

        state.means = fresh.means
        state.m2 = fresh.m2
        state.variances = fresh.variances
        state.priors = fresh.priors
        state.class_counts = fresh.class_counts
        state.training_points = fresh.training_points
        return state
