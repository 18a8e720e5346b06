"""
Tests for sampled numeric distributions.
"""

from __future__ import annotations

__author__ = "rlmdp-core developers"
__copyright__ = "Copyright (c) 2026 rlmdp-core project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Any

import numpy as np
import pytest

from rlmdp_core.distributions import (
    Beta,
    Gamma,
    Gaussian,
    NumericDistribution,
    Poisson,
    Uniform,
)
from rlmdp_core.types import Kind

N_SAMPLES = 20_000


@pytest.mark.parametrize(
    "distr, mean, var",
    [
        (Uniform(2.0, 4.0), 3.0, 4 / 12),
        (Gaussian(1.0, 2.0), 1.0, 4.0),
        (Poisson(3.0), 3.0, 3.0),
        (Gamma(2.0, 1.5), 3.0, 4.5),
        (Beta(2.0, 3.0), 0.4, 0.04),
    ],
    ids=["uniform", "gaussian", "poisson", "gamma", "beta"],
)
def test_sample_moments(distr: NumericDistribution[Any], mean: float, var: float) -> None:
    arr = distr.sample_n(N_SAMPLES).array

    assert arr.shape == (N_SAMPLES,)
    assert float(arr.mean()) == pytest.approx(mean, abs=5 * np.sqrt(var / N_SAMPLES))
    assert float(arr.var()) == pytest.approx(var, rel=0.1)


def test_scalar_sample_types() -> None:
    assert isinstance(Gaussian(0.0, 1.0).sample(), float)
    assert isinstance(Poisson(2.0).sample(), int)
    assert all(isinstance(k, int) for k in Poisson(2.0).sample_n(10))


def test_kinds() -> None:
    assert Gaussian(0.0, 1.0).kind == Kind.CONTINUOUS
    assert Poisson(1.0).kind == Kind.DISCRETE


def test_expectation_is_monte_carlo() -> None:
    assert Gaussian(5.0, 1.0).expectation(lambda x: x) == pytest.approx(5.0, abs=0.05)


def test_support_bounds() -> None:
    arr = Uniform(-1.0, 1.0).sample_n(1000).array
    assert ((arr >= -1.0) & (arr < 1.0)).all()

    arr = Beta(0.5, 0.5).sample_n(1000).array
    assert ((arr >= 0.0) & (arr <= 1.0)).all()


@pytest.mark.parametrize(
    "factory, match",
    [
        (lambda: Uniform(1.0, 1.0), "low < high"),
        (lambda: Gaussian(0.0, 0.0), "sigma must be positive"),
        (lambda: Poisson(-1.0), "lam must be positive"),
        (lambda: Gamma(0.0, 1.0), "alpha must be positive"),
        (lambda: Beta(1.0, -2.0), "beta must be positive"),
    ],
)
def test_invalid_parameters(factory: Any, match: str) -> None:
    with pytest.raises(ValueError, match=match):
        factory()


def test_negative_sample_size() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        Gaussian(0.0, 1.0).sample_n(-5)


def test_repr() -> None:
    assert repr(Gaussian(0.0, 1.0)) == "Gaussian(mu=0.0, sigma=1.0)"
    assert repr(Poisson(2)) == "Poisson(lam=2.0)"
