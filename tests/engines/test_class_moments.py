# tests/engines/test_class_moments.py
from __future__ import annotations

import numpy as np
import pytest

from gaussian_nb.config.classifier_config import VarianceEstimator, VarianceMode
from gaussian_nb.engines.class_moments import ClassMoments


# -----------------------------------------------------------------------------
# helpers
# -----------------------------------------------------------------------------
def assert_same_moments(a: ClassMoments, b: ClassMoments, rtol=1e-10, atol=1e-10):
    assert a.count == b.count
    np.testing.assert_allclose(a.mean, b.mean, rtol=rtol, atol=atol)
    np.testing.assert_allclose(a.m2, b.m2, rtol=rtol, atol=atol)


# -----------------------------------------------------------------------------
# 1. two-pass block matches numpy
# -----------------------------------------------------------------------------
def test_two_pass_block_matches_numpy(rng):
    X = rng.normal(3.0, 2.0, size=(50, 3))

    m = ClassMoments.from_block(X, VarianceMode.TWO_PASS)

    assert m.count == 50
    np.testing.assert_allclose(m.mean, X.mean(axis=0))
    np.testing.assert_allclose(m.variance(VarianceEstimator.UNBIASED), X.var(axis=0, ddof=1))
    np.testing.assert_allclose(m.variance(VarianceEstimator.BIASED), X.var(axis=0, ddof=0))


def test_online_block_matches_two_pass(rng):
    X = rng.normal(-1.0, 0.5, size=(40, 5))

    assert_same_moments(
        ClassMoments.from_block(X, VarianceMode.ONLINE),
        ClassMoments.from_block(X, VarianceMode.TWO_PASS),
    )


def test_online_keeps_precision_with_large_offset():
    """
    Values around 1e9 with unit spread: the naive E[x^2] - E[x]^2 formula
    collapses here, Welford does not.
    """
    X = (1e9 + np.array([4.0, 7.0, 13.0, 16.0]))[:, None]

    m = ClassMoments.from_block(X, VarianceMode.ONLINE)

    np.testing.assert_allclose(m.variance(VarianceEstimator.UNBIASED), [30.0], rtol=1e-9)


# -----------------------------------------------------------------------------
# 2. push / merge agree with a single block
# -----------------------------------------------------------------------------
def test_push_sequence_equals_block(rng):
    X = rng.normal(size=(30, 2))

    acc = ClassMoments.empty(2)
    for p in X:
        acc = acc.push(p)

    assert_same_moments(acc, ClassMoments.from_block(X))


def test_push_is_order_independent(rng):
    X = rng.normal(size=(25, 3))

    fwd = ClassMoments.empty(3)
    for p in X:
        fwd = fwd.push(p)
    rev = ClassMoments.empty(3)
    for p in X[::-1]:
        rev = rev.push(p)

    assert_same_moments(fwd, rev)


@pytest.mark.parametrize("cut", [1, 7, 19])
def test_merge_equals_block(rng, cut):
    X = rng.normal(2.0, 3.0, size=(20, 4))

    merged = ClassMoments.from_block(X[:cut]).merge(ClassMoments.from_block(X[cut:]))

    assert_same_moments(merged, ClassMoments.from_block(X))


def test_merge_with_empty_is_identity(rng):
    m = ClassMoments.from_block(rng.normal(size=(5, 2)))
    e = ClassMoments.empty(2)

    assert m.merge(e) is m
    assert e.merge(m) is m


# -----------------------------------------------------------------------------
# 3. variance edge cases
# -----------------------------------------------------------------------------
def test_single_point_unbiased_variance_is_floor():
    m = ClassMoments.empty(3).push(np.array([1.0, 2.0, 3.0]))

    np.testing.assert_array_equal(m.m2, np.zeros(3))
    np.testing.assert_array_equal(m.variance(VarianceEstimator.UNBIASED, floor=1e-9), [1e-9] * 3)


def test_empty_variance_is_floor():
    v = ClassMoments.empty(2).variance(VarianceEstimator.BIASED, floor=0.25)

    np.testing.assert_array_equal(v, [0.25, 0.25])


def test_constant_feature_is_floored():
    X = np.array([[1.0, 5.0], [2.0, 5.0], [3.0, 5.0]])

    v = ClassMoments.from_block(X).variance(VarianceEstimator.UNBIASED, floor=1e-6)

    assert v[0] == pytest.approx(1.0)
    assert v[1] == 1e-6
