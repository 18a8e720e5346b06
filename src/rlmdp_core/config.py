"""
Library Settings
================

Process-wide settings and the shared random generator.

- :class:`Settings` holds tunable defaults (Monte Carlo sample size,
  probability tolerance, random seed).
- :func:`settings` and :func:`random_generator` are cached accessors that
  build the active instances once per process.
- :func:`configure` overrides individual fields; :func:`reset_settings`
  drops both caches (used by the test suite).
"""

from __future__ import annotations

__author__ = "rlmdp-core developers"
__copyright__ = "Copyright (c) 2026 rlmdp-core project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, fields
from functools import lru_cache
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from typing import Any


@dataclass(slots=True)
class Settings:
    """
    Tunable library defaults.

    Parameters
    ----------
    expectation_samples : int, default 10_000
        Number of draws used by Monte Carlo expectations when the caller
        does not pass ``sample_size``.
    probability_tolerance : float, default 1e-8
        Allowed deviation of a probability table total from one before a
        warning is emitted. Also used when comparing finite distributions.
    seed : int or None, default None
        Seed of the shared random generator. ``None`` draws fresh entropy.
    """

    expectation_samples: int = 10_000
    probability_tolerance: float = 1e-8
    seed: int | None = None

    def validate(self) -> None:
        """
        Check that all fields hold admissible values.

        Raises
        ------
        ValueError
            If ``expectation_samples`` is not positive or
            ``probability_tolerance`` is negative.
        """
        if self.expectation_samples < 1:
            raise ValueError(
                f"expectation_samples must be positive, got {self.expectation_samples}"
            )
        if self.probability_tolerance < 0:
            raise ValueError(
                f"probability_tolerance must be non-negative, got {self.probability_tolerance}"
            )


@lru_cache(maxsize=1)
def settings() -> Settings:
    """
    Return the active settings (created with defaults on first access).
    """
    return Settings()


@lru_cache(maxsize=1)
def random_generator() -> np.random.Generator:
    """
    Return the random generator shared by all samplers.

    Notes
    -----
    The generator is seeded from :attr:`Settings.seed` when first requested.
    Calling :func:`configure` with a new ``seed`` rebuilds it.
    """
    return np.random.default_rng(settings().seed)


def configure(**overrides: Any) -> Settings:
    """
    Override fields of the active settings.

    Parameters
    ----------
    **overrides
        Field names of :class:`Settings` and their new values.

    Returns
    -------
    Settings
        The updated active settings.

    Raises
    ------
    ValueError
        If an unknown field is given or a value is not admissible. The
        active settings are left untouched in that case.
    """
    current = settings()
    known = {f.name for f in fields(Settings)}
    unknown = set(overrides) - known
    if unknown:
        raise ValueError(f"Unknown settings: {', '.join(sorted(unknown))}")

    candidate = Settings(**{name: getattr(current, name) for name in known})
    for name, value in overrides.items():
        setattr(candidate, name, value)
    candidate.validate()

    for name, value in overrides.items():
        setattr(current, name, value)

    if "seed" in overrides:
        random_generator.cache_clear()
    return current


def reset_settings() -> None:
    """
    Reset the cached settings and random generator.
    """
    settings.cache_clear()
    random_generator.cache_clear()


__all__ = [
    "Settings",
    "settings",
    "random_generator",
    "configure",
    "reset_settings",
]
