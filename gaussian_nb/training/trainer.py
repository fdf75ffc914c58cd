# gaussian_nb/training/trainer.py
from __future__ import annotations

from typing import Any, Callable, Dict, Optional

import numpy as np

from gaussian_nb import logs
from gaussian_nb.config.classifier_config import ClassifierConfig, VarianceMode
from gaussian_nb.model.state import ModelState
from gaussian_nb.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)
from gaussian_nb.training.batch_train_engine import BatchTrainEngine
from gaussian_nb.training.merge_train_engine import MergeTrainEngine
from gaussian_nb.training.model_train_engine import ModelTrainEngine
from gaussian_nb.training.point_train_engine import PointTrainEngine
from gaussian_nb.utils.arrays import (
    as_float_array,
    as_labels,
    as_matrix,
    check_labels,
    check_width,
)
from gaussian_nb.utils.errors import DimensionMismatch

_ENGINE_REGISTRY: Dict[str, Callable[[ClassifierConfig], ModelTrainEngine]] = {
    "batch": lambda cfg: BatchTrainEngine(cfg),
    "merge": lambda cfg: MergeTrainEngine(cfg),
    "point": lambda cfg: PointTrainEngine(cfg),
}


def resolve_train_engine(kind: str, cfg: ClassifierConfig) -> ModelTrainEngine:
    if kind not in _ENGINE_REGISTRY:
        available = ", ".join(_ENGINE_REGISTRY)
        raise ValueError(f"No ModelTrainEngine for {kind!r}. Available: {available}")
    return _ENGINE_REGISTRY[kind](cfg)


class Trainer:
    """
    Trainer

    Owns the training contract boundary:
    - coerce and validate inputs (width, label range, label / row alignment)
    - size an unsized model on first use
    - pick the engine (batch replace / batch merge / single point)
    - nothing is mutated when validation fails

    Single-writer: the state is updated in place without locking.
    """

    def __init__(
        self,
        cfg: ClassifierConfig,
        inst: Instrumentation | NoOpInstrumentation | None = None,
    ):
        self.cfg = cfg
        self.inst = inst if inst is not None else NoOpInstrumentation()

    # ------------------------------------------------------------------
    # Batch
    # ------------------------------------------------------------------
    def train(
        self,
        state: ModelState,
        data: Any,
        labels: Any,
        *,
        incremental: bool = True,
        classes: Optional[int] = None,
        variance_mode: Optional[VarianceMode] = None,
    ) -> ModelState:
        X = as_matrix(data)
        y = as_labels(labels)

        if y.shape[0] != X.shape[0]:
            raise DimensionMismatch(
                f"{y.shape[0]} labels for {X.shape[0]} points"
            )

        state = self._sized(state, X.shape[1], y, classes)
        check_width(X, state.dimensionality)
        check_labels(y, state.n_classes)

        cfg = self.cfg
        if variance_mode is not None:
            cfg = cfg.model_copy(update={"variance_mode": VarianceMode(variance_mode)})

        kind = "merge" if incremental else "batch"
        engine = resolve_train_engine(kind, cfg)

        logs.info(
            f"[Trainer] {kind} n={X.shape[0]} D={state.dimensionality} "
            f"C={state.n_classes} mode={cfg.variance_mode.value}"
        )

        with self.inst.timer(f"train.{kind}"):
            state = engine.train(state=state, X=X, y=y)

        self.inst.record("training_points", state.training_points)
        self.inst.record("n_classes", state.n_classes)
        return state

    # ------------------------------------------------------------------
    # Single point
    # ------------------------------------------------------------------
    def train_point(self, state: ModelState, point: Any, label: Any) -> ModelState:
        x = as_float_array(point)
        if x.ndim != 1:
            raise DimensionMismatch(f"expected a single point (D,), got ndim={x.ndim}")

        y = as_labels(np.atleast_1d(label))
        state = self._sized(state, x.shape[0], y, None)
        check_width(x, state.dimensionality)
        check_labels(y, state.n_classes)

        engine = resolve_train_engine("point", self.cfg)

        with self.inst.timer("train.point"):
            state = engine.train_point(state=state, point=x, label=int(y[0]))

        logs.debug(f"[Trainer] point label={int(y[0])} total={state.training_points}")
        self.inst.record("training_points", state.training_points)
        return state

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _sized(
        self,
        state: ModelState,
        width: int,
        y: np.ndarray,
        classes: Optional[int],
    ) -> ModelState:
        """
        An untrained model with D == 0 adopts the data width; one with
        C == 0 adopts `classes` or max(label) + 1. A fixed C never changes.
        """
        n_classes = state.n_classes
        if n_classes == 0:
            if classes is not None:
                n_classes = int(classes)
            elif y.size:
                n_classes = max(int(y.max()) + 1, 0)
        elif classes is not None and int(classes) != n_classes:
            raise DimensionMismatch(
                f"classes={classes} conflicts with model class count {n_classes}"
            )

        dimensionality = state.dimensionality
        if dimensionality == 0 and not state.is_trained:
            dimensionality = width

        if (n_classes, dimensionality) == (state.n_classes, state.dimensionality):
            return state

        logs.debug(f"[Trainer] sizing model D={dimensionality} C={n_classes}")
        return ModelState.zeros(dimensionality, n_classes, self.cfg.variance_floor)
