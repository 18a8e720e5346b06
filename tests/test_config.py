from __future__ import annotations

__author__ = "rlmdp-core developers"
__copyright__ = "Copyright (c) 2026 rlmdp-core project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from rlmdp_core.config import (
    Settings,
    configure,
    random_generator,
    reset_settings,
    settings,
)
from rlmdp_core.distributions import Gaussian


def test_settings_are_cached_singleton() -> None:
    assert settings() is settings()
    assert random_generator() is random_generator()


def test_defaults_after_reset() -> None:
    reset_settings()
    s = settings()
    assert s == Settings()
    assert s.expectation_samples == 10_000
    assert s.seed is None


def test_configure_updates_fields() -> None:
    s = configure(expectation_samples=123, probability_tolerance=1e-6)
    assert s is settings()
    assert s.expectation_samples == 123
    assert s.probability_tolerance == pytest.approx(1e-6)


def test_configure_rejects_unknown_field() -> None:
    with pytest.raises(ValueError, match="Unknown settings: bogus"):
        configure(bogus=1)


@pytest.mark.parametrize(
    "overrides",
    [
        {"expectation_samples": 0},
        {"probability_tolerance": -1.0},
    ],
)
def test_configure_rejects_invalid_values_and_keeps_state(overrides: dict[str, float]) -> None:
    before = settings().expectation_samples, settings().probability_tolerance
    with pytest.raises(ValueError):
        configure(**overrides)
    assert (settings().expectation_samples, settings().probability_tolerance) == before


def test_seed_makes_sampling_reproducible() -> None:
    configure(seed=7)
    first = Gaussian(0.0, 1.0).sample_n(5).outcomes

    configure(seed=7)
    second = Gaussian(0.0, 1.0).sample_n(5).outcomes

    assert first == second


def test_changing_seed_rebuilds_generator() -> None:
    rng = random_generator()
    configure(seed=11)
    assert random_generator() is not rng

    rng = random_generator()
    configure(expectation_samples=50)
    assert random_generator() is rng
