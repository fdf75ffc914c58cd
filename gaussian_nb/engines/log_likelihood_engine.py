# gaussian_nb/engines/log_likelihood_engine.py
from __future__ import annotations

import numpy as np

from gaussian_nb.model.state import ModelState

_LOG_2PI = np.log(2.0 * np.pi)


class LogLikelihoodEngine:
    """
    LogLikelihoodEngine

    Unnormalized log posterior under per-feature independent Gaussians:

        ll_c(x) = log(prior_c)
                  + sum_i [ -0.5 * log(2 pi var_ci) - (x_i - mean_ci)^2 / (2 var_ci) ]

    Contract:
    - state.variances >= floor > 0, so no division by zero and no log(0)
      on the feature terms
    - prior_c == 0 gives log(prior_c) = -inf: the class can never win
    - input width already checked against state.dimensionality

    Rows are independent; large batches are evaluated in chunks of
    `chunk_size` rows to bound the (rows, C, D) temporary.
    """

    def __init__(self, chunk_size: int = 4096):
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self.chunk_size = chunk_size

    def execute(self, state: ModelState, X: np.ndarray) -> np.ndarray:
        """
        X (D,)   -> (C,)
        X (N, D) -> (N, C)
        """
        if X.ndim == 1:
            return self._evaluate(state, X[None, :])[0]

        out = np.empty((X.shape[0], state.n_classes))
        for lo in range(0, X.shape[0], self.chunk_size):
            hi = lo + self.chunk_size
            out[lo:hi] = self._evaluate(state, X[lo:hi])
        return out

    @staticmethod
    def _evaluate(state: ModelState, X: np.ndarray) -> np.ndarray:
        var = state.variances

        with np.errstate(divide="ignore"):
            log_prior = np.log(state.priors)  # (C,)

        log_norm = -0.5 * np.sum(_LOG_2PI + np.log(var), axis=1)  # (C,)

        diff = X[:, None, :] - state.means[None, :, :]  # (n, C, D)
        maha = np.sum(diff * diff / var[None, :, :], axis=2)  # (n, C)

        return log_prior[None, :] + log_norm[None, :] - 0.5 * maha
