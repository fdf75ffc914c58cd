# tests/conftest.py
from __future__ import annotations

import numpy as np
import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    logger.enable("gaussian_nb")
    yield
    logger.disable("gaussian_nb")


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(20240607)


@pytest.fixture
def labelled_data(rng):
    """
    600 points, D=4, C=3, per-class offsets and scales so every class has a
    distinct mean / variance. Labels are shuffled (classes interleaved).
    """
    n, d, c = 600, 4, 3
    y = rng.integers(0, c, size=n)
    centers = np.array([[0.0, 1.0, -2.0, 5.0], [3.0, -1.0, 0.5, 2.0], [-4.0, 2.0, 1.0, 0.0]])
    scales = np.array([[1.0, 0.5, 2.0, 1.0], [0.3, 1.5, 1.0, 0.7], [2.0, 1.0, 0.2, 3.0]])
    X = centers[y] + scales[y] * rng.standard_normal((n, d))
    return X, y, c


@pytest.fixture
def two_clusters(rng):
    """
    Class 0 around (0, 0), class 1 around (10, 10), unit variance,
    100 points each.
    """
    X0 = rng.standard_normal((100, 2))
    X1 = rng.standard_normal((100, 2)) + 10.0
    X = np.vstack([X0, X1])
    y = np.array([0] * 100 + [1] * 100)
    return X, y
