# gaussian_nb/training/model_train_engine.py
from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from gaussian_nb.config.classifier_config import ClassifierConfig
from gaussian_nb.engines.moment_estimate_engine import MomentEstimateEngine
from gaussian_nb.model.state import ModelState


class ModelTrainEngine(ABC):
    """
    Abstract ModelTrainEngine

    Contract:
    - inputs are validated by the Trainer (width, labels, sizing)
    - state is updated IN PLACE and returned
    - priors are re-derived from integer counts after every update
    """

    def __init__(self, cfg: ClassifierConfig):
        self.cfg = cfg
        self.estimator = MomentEstimateEngine(cfg.variance_mode)

    @abstractmethod
    def train(
        self,
        *,
        state: ModelState,
        X: np.ndarray,
        y: np.ndarray,
    ) -> ModelState:
        raise NotImplementedError
