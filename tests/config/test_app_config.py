#!filepath: tests/config/test_app_config.py
import yaml
import pytest
from pydantic import ValidationError

from gaussian_nb.config import AppConfig
from gaussian_nb.config.classifier_config import (
    ClassifierConfig,
    VarianceEstimator,
    VarianceMode,
)
from gaussian_nb.config.dataset_config import FeatureLabelConfig
from gaussian_nb.config.log_config import LogConfig


@pytest.fixture
def sample_config_file(tmp_path):
    """
    Temporary YAML config, cleaned up by pytest.
    """
    data = {
        "log": {
            "dir": None,
            "rotation": "1 day",
            "retention": "7 days",
            "level": "DEBUG",
        },
        "classifier": {
            "variance_mode": "online",
            "variance_estimator": "biased",
            "variance_floor": 1e-6,
        },
        "dataset": {
            "feature_columns": ["f1", "f2"],
            "label_column": "label",
        },
    }

    config_file = tmp_path / "config.yaml"
    config_file.write_text(yaml.safe_dump(data), encoding="utf-8")
    return config_file


@pytest.fixture(autouse=True)
def _no_env_override(monkeypatch):
    monkeypatch.delenv("GNB_LOG_LEVEL", raising=False)


def test_app_config_load(sample_config_file):
    cfg = AppConfig.load(path=str(sample_config_file))

    assert isinstance(cfg, AppConfig)
    assert isinstance(cfg.log, LogConfig)
    assert isinstance(cfg.classifier, ClassifierConfig)
    assert isinstance(cfg.dataset, FeatureLabelConfig)


def test_classifier_config_values(sample_config_file):
    cfg = AppConfig.load(path=str(sample_config_file))

    assert cfg.classifier.variance_mode is VarianceMode.ONLINE
    assert cfg.classifier.variance_estimator is VarianceEstimator.BIASED
    assert cfg.classifier.variance_floor == 1e-6


def test_default_base_config():
    cfg = AppConfig.load()

    assert cfg.classifier == ClassifierConfig()
    assert cfg.log.dir is None
    assert cfg.dataset is None


def test_env_overrides_log_level(sample_config_file, monkeypatch):
    monkeypatch.setenv("GNB_LOG_LEVEL", "ERROR")

    cfg = AppConfig.load(path=str(sample_config_file))

    assert cfg.log.level == "ERROR"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        AppConfig.load(path=str(tmp_path / "nope.yml"))


@pytest.mark.parametrize(
    "classifier",
    [
        {"variance_floor": 0.0},
        {"variance_floor": -1.0},
        {"variance_mode": "three_pass"},
        {"variance_estimator": "robust"},
    ],
)
def test_invalid_classifier_section(tmp_path, classifier):
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text(yaml.safe_dump({"classifier": classifier}))

    with pytest.raises(ValidationError):
        AppConfig.load(path=str(bad_file))


def test_estimator_ddof():
    assert VarianceEstimator.UNBIASED.ddof == 1
    assert VarianceEstimator.BIASED.ddof == 0
