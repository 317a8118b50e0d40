# coding: utf-8

# ====================================================
# imports
import numpy as np

from anneal.compute import T
from anneal.compute import acceptance_probability
from anneal.compute import decay_constant


# ====================================================
# code
def test_decay_constant():
    k = decay_constant(100, 1, np.exp(-2))

    assert np.isclose(k, 50)


def test_temperature():
    k = decay_constant(100, 1, 1e-5)

    assert T(0, 5.0, k) == 5.0
    assert np.isclose(T(k, 5.0, k), 5.0 / np.e)
    assert np.isclose(T(100, 5.0, k), 5.0 * 1e-5)


def test_acceptance_probability():
    assert acceptance_probability(2.0, 2.0, 0.5) == 1.0
    assert np.isclose(acceptance_probability(2.0, 3.0, 0.5), np.exp(-2))
    assert acceptance_probability(2.0, 3.0, 1e-300) == 0.0


def test_non_finite_values():
    with np.errstate(divide="ignore", invalid="ignore"):
        assert np.isnan(T(0, 1.0, 0.0))
        assert T(1, 1.0, 0.0) == 0.0
        assert np.isnan(acceptance_probability(1.0, 1.0, 0.0))
        assert np.isnan(acceptance_probability(1.0, 2.0, np.nan))
