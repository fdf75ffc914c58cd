#!filepath: gaussian_nb/__init__.py

# logs first: every submodule does `from gaussian_nb import logs`
from .utils.logger import Logging, logs, init_logging
from .utils.errors import (
    NaiveBayesError,
    DimensionMismatch,
    LabelOutOfRange,
    InvalidState,
    InvalidParameters,
)
from .config import (
    AppConfig,
    ClassifierConfig,
    FeatureLabelConfig,
    LogConfig,
    VarianceEstimator,
    VarianceMode,
)
from .dataset import Dataset
from .model import ModelParameters
from .classifier import NaiveBayesClassifier

__all__ = [
    "logs", "Logging", "init_logging",
    "NaiveBayesError", "DimensionMismatch", "LabelOutOfRange",
    "InvalidState", "InvalidParameters",
    "AppConfig", "ClassifierConfig", "FeatureLabelConfig", "LogConfig",
    "VarianceEstimator", "VarianceMode",
    "Dataset",
    "ModelParameters",
    "NaiveBayesClassifier",
]
