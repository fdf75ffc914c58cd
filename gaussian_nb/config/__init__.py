from .app_config import AppConfig
from .classifier_config import ClassifierConfig, VarianceEstimator, VarianceMode
from .dataset_config import FeatureLabelConfig
from .log_config import LogConfig

__all__ = [
    "AppConfig",
    "ClassifierConfig",
    "VarianceEstimator",
    "VarianceMode",
    "FeatureLabelConfig",
    "LogConfig",
]
