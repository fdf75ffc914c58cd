#!filepath: gaussian_nb/config/app_config.py
import os
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

from .classifier_config import ClassifierConfig
from .dataset_config import FeatureLabelConfig
from .log_config import LogConfig


def package_root() -> str:
    """
    gaussian_nb/config/app_config.py -> gaussian_nb/config -> gaussian_nb
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


class AppConfig(BaseModel):
    log: LogConfig = LogConfig()
    classifier: ClassifierConfig = ClassifierConfig()
    dataset: Optional[FeatureLabelConfig] = None

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        Load YAML config + .env
        - default: gaussian_nb/config/base.yml
        - GNB_LOG_LEVEL overrides log.level
        """
        # 1) .env in the working directory (no error when absent)
        load_dotenv()

        # 2) config path
        if path is None:
            path = os.path.join(package_root(), "config", "base.yml")

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        # 4) env overrides
        level = os.getenv("GNB_LOG_LEVEL")
        if level:
            raw.setdefault("log", {})
            raw["log"] = {**(raw["log"] or {}), "level": level}

        return cls(**raw)
