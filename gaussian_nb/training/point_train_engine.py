# gaussian_nb/training/point_train_engine.py
from __future__ import annotations

import numpy as np

from gaussian_nb.model.state import ModelState
from gaussian_nb.training.model_train_engine import ModelTrainEngine


class PointTrainEngine(ModelTrainEngine):
    """
    PointTrainEngine (incremental, single point)

    Welford update of one class aggregate:
        n'     = n + 1
        delta  = x - mean
        mean'  = mean + delta / n'
        M2'    = M2 + delta * (x - mean')
    then every prior is recomputed (the denominator changed).
    """

    def train(
        self,
        *,
        state: ModelState,
        X: np.ndarray,
        y: np.ndarray,
    ) -> ModelState:
        for point, label in zip(X, y):
            self.train_point(state=state, point=point, label=int(label))
        return state

    def train_point(
        self,
        *,
        state: ModelState,
        point: np.ndarray,
        label: int,
    ) -> ModelState:
        state.check_bookkeeping(incoming=1)

        state.set_moments(
            label,
            state.moments(label).push(point),
            estimator=self.cfg.variance_estimator,
            floor=self.cfg.variance_floor,
        )

        state.training_points += 1
        state.refresh_priors()
        return state
