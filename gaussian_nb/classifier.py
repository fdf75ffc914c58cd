# gaussian_nb/classifier.py
from __future__ import annotations

from typing import Any, Optional, Tuple

import numpy as np

from gaussian_nb import logs
from gaussian_nb.config.classifier_config import ClassifierConfig, VarianceMode
from gaussian_nb.engines.decision_engine import DecisionEngine
from gaussian_nb.engines.log_likelihood_engine import LogLikelihoodEngine
from gaussian_nb.model.parameters import ModelParameters
from gaussian_nb.model.state import ModelState
from gaussian_nb.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)
from gaussian_nb.training.trainer import Trainer
from gaussian_nb.utils.arrays import as_float_array, as_point_or_matrix, check_width
from gaussian_nb.utils.errors import DimensionMismatch, InvalidState


class NaiveBayesClassifier:
    """
    Gaussian Naive Bayes classifier.

    Estimates, per class, the mean and variance of every feature plus the
    class prior, and classifies by maximum a posteriori over per-class
    log-likelihoods. Features are assumed independent given the class.

    Layout: points are rows. ``data`` is (N, D); ``means`` / ``variances``
    are (C, D); probabilities for a batch are (N, C).

    Lifecycle: untrained (``training_points == 0``) until the first training
    call that sees a point, trained afterwards. Classifying an untrained
    model is allowed but meaningless: every class has prior 0, the label is
    0 and the probabilities are uniform.

    Not thread-safe: do not train concurrently with any other call on the
    same instance.

    Example::

        clf = NaiveBayesClassifier.from_data(X, y, classes=3)
        label, probs = clf.classify_proba(x)
        clf.train(X_new, y_new)          # merge into the current model
        clf.train_point(x_new, label)    # Welford single-point update
    """

    def __init__(
        self,
        dimensionality: int = 0,
        classes: int = 0,
        *,
        config: Optional[ClassifierConfig] = None,
        inst: Instrumentation | NoOpInstrumentation | None = None,
    ):
        if dimensionality < 0 or classes < 0:
            raise ValueError("dimensionality and classes must be non-negative")

        self.config = config if config is not None else ClassifierConfig()
        self.inst = inst if inst is not None else NoOpInstrumentation()

        self._state = ModelState.zeros(dimensionality, classes, self.config.variance_floor)
        self._trainer = Trainer(self.config, self.inst)
        self._likelihood = LogLikelihoodEngine()
        self._decision = DecisionEngine()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_zero(
        cls,
        dimensionality: int,
        classes: int,
        *,
        config: Optional[ClassifierConfig] = None,
        inst: Instrumentation | NoOpInstrumentation | None = None,
    ) -> "NaiveBayesClassifier":
        """
        Zero-initialized model: means 0, variances at the floor, priors 0.
        """
        return cls(dimensionality, classes, config=config, inst=inst)

    @classmethod
    def from_data(
        cls,
        data: Any,
        labels: Any,
        classes: Optional[int] = None,
        variance_mode: Optional[VarianceMode] = None,
        *,
        config: Optional[ClassifierConfig] = None,
        inst: Instrumentation | NoOpInstrumentation | None = None,
    ) -> "NaiveBayesClassifier":
        """
        Create and batch-train immediately. ``classes=None`` infers
        ``max(labels) + 1``.
        """
        config = config if config is not None else ClassifierConfig()
        if variance_mode is not None:
            config = config.model_copy(update={"variance_mode": VarianceMode(variance_mode)})

        clf = cls(config=config, inst=inst)
        clf.train(data, labels, incremental=False, classes=classes)
        return clf

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------
    @logs.catch(msg="training failed")
    def train(
        self,
        data: Any,
        labels: Any,
        incremental: bool = True,
        classes: Optional[int] = None,
        variance_mode: Optional[VarianceMode] = None,
    ) -> "NaiveBayesClassifier":
        """
        Train on a block of points.

        incremental=True merges the block into the current model;
        incremental=False replaces the model with one fitted to the block.
        variance_mode overrides the configured mode for this call only.
        """
        self._state = self._trainer.train(
            self._state,
            data,
            labels,
            incremental=incremental,
            classes=classes,
            variance_mode=variance_mode,
        )
        return self

    @logs.catch(msg="single-point training failed")
    def train_point(self, point: Any, label: int) -> "NaiveBayesClassifier":
        self._state = self._trainer.train_point(self._state, point, label)
        return self

    # ------------------------------------------------------------------
    # Inference
    # ------------------------------------------------------------------
    def log_likelihood(self, x: Any) -> np.ndarray:
        """
        (D,) -> (C,), (N, D) -> (N, C). Unnormalized log posterior.
        """
        X, _ = as_point_or_matrix(x)
        if self._state.n_classes == 0:
            raise InvalidState("model has no classes; train it or use from_zero(D, C)")
        check_width(X, self._state.dimensionality)

        with self.inst.timer("classify.log_likelihood"):
            return self._likelihood.execute(self._state, X)

    def classify(self, x: Any):
        """
        (D,) -> int label, (N, D) -> (N,) labels.
        Ties go to the lowest class index.
        """
        return self._decision.decide(self.log_likelihood(x))

    def classify_proba(self, x: Any) -> Tuple[Any, np.ndarray]:
        """
        (D,) -> (label, (C,) probabilities)
        (N, D) -> ((N,) labels, (N, C) probabilities)
        """
        return self._decision.execute(self.log_likelihood(x))

    # ------------------------------------------------------------------
    # Accessors (copy on read, unchecked on write)
    # ------------------------------------------------------------------
    @property
    def means(self) -> np.ndarray:
        return self._state.means.copy()

    @means.setter
    def means(self, value: Any) -> None:
        self._write("means", value, ndim=2)

    @property
    def variances(self) -> np.ndarray:
        return self._state.variances.copy()

    @variances.setter
    def variances(self, value: Any) -> None:
        self._write("variances", value, ndim=2)
        # M2 follows so later merges start from the edited spread
        self._state.rebuild_m2(self.config.variance_estimator)

    @property
    def priors(self) -> np.ndarray:
        return self._state.priors.copy()

    @priors.setter
    def priors(self, value: Any) -> None:
        self._write("priors", value, ndim=1)

    def _write(self, name: str, value: Any, *, ndim: int) -> None:
        """
        Direct field write. Values are not validated, only the rank is.
        A write that changes C (or D) resets counts, M2 and training_points,
        so the class count can be changed by setting means, variances and
        priors in turn.
        """
        arr = as_float_array(value).copy()
        if arr.ndim != ndim:
            raise DimensionMismatch(f"{name} must be {ndim}-D, got ndim={arr.ndim}")

        s = self._state
        current = getattr(s, name)
        if arr.shape != current.shape or arr.shape[0] != s.class_counts.shape[0]:
            dimensionality = arr.shape[1] if ndim == 2 else s.dimensionality
            logs.warning(
                f"[NaiveBayesClassifier] {name} resized {current.shape} -> {arr.shape}, "
                f"dropping {s.training_points} training points of history"
            )
            s.reset_counts(arr.shape[0], dimensionality)

        setattr(s, name, arr)

    @property
    def class_counts(self) -> np.ndarray:
        return self._state.class_counts.copy()

    @property
    def training_points(self) -> int:
        return self._state.training_points

    @property
    def dimensionality(self) -> int:
        return self._state.dimensionality

    @property
    def n_classes(self) -> int:
        return self._state.n_classes

    @property
    def is_trained(self) -> bool:
        return self._state.is_trained

    # ------------------------------------------------------------------
    # Parameter transplant
    # ------------------------------------------------------------------
    def parameters(self) -> ModelParameters:
        s = self._state
        return ModelParameters(
            means=s.means.copy(),
            variances=s.variances.copy(),
            priors=s.priors.copy(),
            training_points=int(s.training_points),
            class_counts=s.class_counts.copy(),
        )

    def load_parameters(self, params: ModelParameters) -> "NaiveBayesClassifier":
        """
        Validated load (shape, finiteness, variance floor, priors, counts).
        The model is untouched when validation fails.
        """
        params.validate(self.config.variance_floor)

        state = ModelState(
            means=params.means.astype(np.float64, copy=True),
            m2=np.zeros_like(params.means, dtype=np.float64),
            variances=params.variances.astype(np.float64, copy=True),
            priors=params.priors.astype(np.float64, copy=True),
            class_counts=params.class_counts.astype(np.int64, copy=True),
            training_points=int(params.training_points),
        )
        state.rebuild_m2(self.config.variance_estimator)
        self._state = state

        logs.info(
            f"[NaiveBayesClassifier] loaded parameters D={state.dimensionality} "
            f"C={state.n_classes} n={state.training_points}"
        )
        return self

    def __repr__(self) -> str:
        return (
            f"NaiveBayesClassifier(dimensionality={self.dimensionality}, "
            f"classes={self.n_classes}, training_points={self.training_points})"
        )
