# tests/model/test_parameters.py
from __future__ import annotations

import numpy as np
import pytest

from gaussian_nb.model.parameters import ModelParameters
from gaussian_nb.model.state import ModelState
from gaussian_nb.config.classifier_config import VarianceEstimator
from gaussian_nb.utils.errors import InvalidParameters


@pytest.fixture
def params() -> ModelParameters:
    return ModelParameters(
        means=np.array([[0.0, 1.0], [2.0, 3.0]]),
        variances=np.array([[1.0, 0.5], [2.0, 0.25]]),
        priors=np.array([0.25, 0.75]),
        training_points=8,
        class_counts=np.array([2, 6]),
    )


def replace(p: ModelParameters, **kw) -> ModelParameters:
    fields = dict(
        means=p.means,
        variances=p.variances,
        priors=p.priors,
        training_points=p.training_points,
        class_counts=p.class_counts,
    )
    fields.update(kw)
    return ModelParameters(**fields)


def test_valid_parameters_pass(params):
    params.validate(variance_floor=1e-9)


def test_dict_form_is_plain_python(params):
    raw = params.to_dict()

    assert raw["priors"] == [0.25, 0.75]
    assert raw["class_counts"] == [2, 6]
    assert isinstance(raw["training_points"], int)

    back = ModelParameters.from_dict(raw)
    np.testing.assert_array_equal(back.means, params.means)
    assert back.class_counts.dtype == np.int64


def test_from_dict_missing_key():
    with pytest.raises(InvalidParameters, match="means"):
        ModelParameters.from_dict({"variances": [], "priors": []})


@pytest.mark.parametrize(
    "kw, match",
    [
        (dict(variances=np.ones((2, 3))), "variances shape"),
        (dict(priors=np.array([1.0])), "priors shape"),
        (dict(class_counts=np.array([8])), "class_counts shape"),
        (dict(means=np.array([0.0, 1.0])), "means must be"),
        (dict(means=np.array([[np.nan, 1.0], [2.0, 3.0]])), "NaN"),
        (dict(variances=np.array([[1.0, 0.0], [2.0, 0.25]])), "variances must be"),
        (dict(priors=np.array([-0.25, 1.25])), r"\[0, 1\]"),
        (dict(priors=np.array([0.5, 0.25])), "sum"),
        (dict(class_counts=np.array([3, 6])), "training_points"),
        (dict(class_counts=np.array([-2, 10])), "non-negative"),
    ],
)
def test_invariant_violations(params, kw, match):
    with pytest.raises(InvalidParameters, match=match):
        replace(params, **kw).validate(variance_floor=1e-9)


def test_untrained_priors_need_not_sum_to_one(params):
    p = replace(
        params,
        priors=np.zeros(2),
        training_points=0,
        class_counts=np.zeros(2, dtype=np.int64),
    )

    p.validate(variance_floor=1e-9)


# -----------------------------------------------------------------------------
# ModelState helpers
# -----------------------------------------------------------------------------
def test_zero_state_respects_floor():
    s = ModelState.zeros(3, 2, variance_floor=1e-4)

    assert s.means.shape == s.variances.shape == (2, 3)
    assert np.all(s.variances == 1e-4)
    assert s.priors.tolist() == [0.0, 0.0]
    assert not s.is_trained


def test_rebuild_m2_inverts_variance():
    s = ModelState.zeros(1, 2, variance_floor=1e-9)
    s.class_counts = np.array([5, 1])
    s.variances = np.array([[2.0], [3.0]])

    s.rebuild_m2(VarianceEstimator.UNBIASED)

    np.testing.assert_array_equal(s.m2, [[8.0], [0.0]])
