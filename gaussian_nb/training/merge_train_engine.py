# gaussian_nb/training/merge_train_engine.py
from __future__ import annotations

import numpy as np

from gaussian_nb.model.state import ModelState
from gaussian_nb.training.model_train_engine import ModelTrainEngine


class MergeTrainEngine(ModelTrainEngine):
    """
    MergeTrainEngine (incremental, batch)

    Semantics:
    - block aggregates are computed over the block only
    - each is merged into the class's stored aggregate
      (parallel variance merge, O(block size) in total)
    - classes absent from the block keep their aggregate; their prior
      still moves because the denominator changed
    """

    def train(
        self,
        *,
        state: ModelState,
        X: np.ndarray,
        y: np.ndarray,
    ) -> ModelState:
        if y.size == 0:
            return state

        state.check_bookkeeping(incoming=int(y.size))

        for c, block in self.estimator.execute_present(X, y).items():
            state.set_moments(
                c,
                state.moments(c).merge(block),
                estimator=self.cfg.variance_estimator,
                floor=self.cfg.variance_floor,
            )

        state.training_points += int(y.size)
        state.refresh_priors()
        return state
