# tests/engines/test_decision_engine.py
from __future__ import annotations

import numpy as np

from gaussian_nb.engines.decision_engine import DecisionEngine


def test_ties_go_to_lowest_index():
    assert DecisionEngine.decide(np.array([-1.0, 3.0, 3.0, 3.0])) == 1
    assert DecisionEngine.decide(np.array([-np.inf, -np.inf])) == 0


def test_batch_decide_returns_int_labels():
    ll = np.array([[0.0, 1.0], [2.0, -1.0], [5.0, 5.0]])

    labels = DecisionEngine.decide(ll)

    assert labels.dtype == np.int64
    assert labels.tolist() == [1, 0, 0]


def test_normalize_sums_to_one_for_extreme_values():
    """
    Raw exp() would overflow (1e4) or underflow (-1e4) here.
    """
    ll = np.array([[1e4, 1e4 - 1.0, 1e4 - 50.0], [-1e4, -1e4 - 2.0, -np.inf]])

    p = DecisionEngine.normalize(ll)

    assert np.all(np.isfinite(p))
    assert np.all((p >= 0.0) & (p <= 1.0))
    np.testing.assert_allclose(p.sum(axis=1), [1.0, 1.0], atol=1e-12)
    np.testing.assert_allclose(p[0, 0] / p[0, 1], np.e)
    assert p[1, 2] == 0.0


def test_all_minus_inf_row_is_uniform():
    ll = np.array([[-np.inf, -np.inf, -np.inf, -np.inf], [0.0, -np.inf, -np.inf, -np.inf]])

    p = DecisionEngine.normalize(ll)

    np.testing.assert_array_equal(p[0], [0.25] * 4)
    np.testing.assert_array_equal(p[1], [1.0, 0.0, 0.0, 0.0])


def test_execute_label_is_probability_argmax(rng):
    ll = rng.normal(scale=20.0, size=(50, 5))

    labels, p = DecisionEngine().execute(ll)

    np.testing.assert_array_equal(labels, p.argmax(axis=1))
