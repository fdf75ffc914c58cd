# gaussian_nb/config/dataset_config.py
from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class FeatureLabelConfig(BaseModel):
    """
    Column contract used by Dataset.from_frame.
    """

    feature_columns: List[str] = Field(..., min_length=1)
    label_column: str
    drop_na: bool = True
