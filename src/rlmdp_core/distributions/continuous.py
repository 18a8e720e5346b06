"""
Sampled Numeric Distributions
=============================

Parametric numeric distributions backed by the shared NumPy generator:

- :class:`Uniform`
- :class:`Gaussian`
- :class:`Poisson`
- :class:`Gamma`
- :class:`Beta`

All of them draw vectorised samples in :meth:`sample_n` and evaluate
expectations by Monte Carlo.
"""

from __future__ import annotations

__author__ = "rlmdp-core developers"
__copyright__ = "Copyright (c) 2026 rlmdp-core project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import abstractmethod
from typing import TYPE_CHECKING

from rlmdp_core.config import random_generator
from rlmdp_core.distributions.distribution import Distribution
from rlmdp_core.distributions.sampling import OutcomeSample
from rlmdp_core.types import Kind

if TYPE_CHECKING:
    from typing import Any

    import numpy as np
    import numpy.typing as npt


class NumericDistribution[N: (float, int)](Distribution[N]):
    """
    Base for distributions drawn directly from a NumPy generator method.

    Subclasses implement :meth:`_draw` returning ``size`` raw variates.
    """

    @abstractmethod
    def _draw(self, rng: np.random.Generator, size: int) -> npt.NDArray[Any]: ...

    def _convert(self, value: Any) -> N:
        return float(value)  # type: ignore[return-value]

    def sample(self) -> N:
        return self._convert(self._draw(random_generator(), 1)[0])

    def sample_n(self, n: int) -> OutcomeSample[N]:
        if n < 0:
            raise ValueError(f"Number of draws must be non-negative, got {n}")
        return OutcomeSample(self._convert(v) for v in self._draw(random_generator(), n))


def _require_positive(**params: float) -> None:
    for name, value in params.items():
        if not value > 0:
            raise ValueError(f"{name} must be positive, got {value}")


class Uniform(NumericDistribution[float]):
    """
    Continuous uniform distribution on ``[low, high)``.

    Raises
    ------
    ValueError
        If ``low >= high``.
    """

    def __init__(self, low: float = 0.0, high: float = 1.0) -> None:
        if not low < high:
            raise ValueError(f"Uniform needs low < high, got low={low}, high={high}")
        self.low = float(low)
        self.high = float(high)

    def _draw(self, rng: np.random.Generator, size: int) -> npt.NDArray[Any]:
        return rng.uniform(self.low, self.high, size)

    def __repr__(self) -> str:
        return f"Uniform(low={self.low}, high={self.high})"


class Gaussian(NumericDistribution[float]):
    """
    Normal distribution with mean ``mu`` and standard deviation ``sigma``.

    Raises
    ------
    ValueError
        If ``sigma`` is not positive.
    """

    def __init__(self, mu: float, sigma: float) -> None:
        _require_positive(sigma=sigma)
        self.mu = float(mu)
        self.sigma = float(sigma)

    def _draw(self, rng: np.random.Generator, size: int) -> npt.NDArray[Any]:
        return rng.normal(self.mu, self.sigma, size)

    def __repr__(self) -> str:
        return f"Gaussian(mu={self.mu}, sigma={self.sigma})"


class Poisson(NumericDistribution[int]):
    """
    Poisson distribution with rate ``lam``; outcomes are ``int``.

    Raises
    ------
    ValueError
        If ``lam`` is not positive.
    """

    def __init__(self, lam: float) -> None:
        _require_positive(lam=lam)
        self.lam = float(lam)

    @property
    def kind(self) -> Kind:
        return Kind.DISCRETE

    def _draw(self, rng: np.random.Generator, size: int) -> npt.NDArray[Any]:
        return rng.poisson(self.lam, size)

    def _convert(self, value: Any) -> int:
        return int(value)

    def __repr__(self) -> str:
        return f"Poisson(lam={self.lam})"


class Gamma(NumericDistribution[float]):
    """
    Gamma distribution with shape ``alpha`` and scale ``theta``.

    Raises
    ------
    ValueError
        If a parameter is not positive.
    """

    def __init__(self, alpha: float, theta: float) -> None:
        _require_positive(alpha=alpha, theta=theta)
        self.alpha = float(alpha)
        self.theta = float(theta)

    def _draw(self, rng: np.random.Generator, size: int) -> npt.NDArray[Any]:
        return rng.gamma(self.alpha, self.theta, size)

    def __repr__(self) -> str:
        return f"Gamma(alpha={self.alpha}, theta={self.theta})"


class Beta(NumericDistribution[float]):
    """
    Beta distribution on ``[0, 1]``.

    Raises
    ------
    ValueError
        If a parameter is not positive.
    """

    def __init__(self, alpha: float, beta: float) -> None:
        _require_positive(alpha=alpha, beta=beta)
        self.alpha = float(alpha)
        self.beta = float(beta)

    def _draw(self, rng: np.random.Generator, size: int) -> npt.NDArray[Any]:
        return rng.beta(self.alpha, self.beta, size)

    def __repr__(self) -> str:
        return f"Beta(alpha={self.alpha}, beta={self.beta})"


__all__ = [
    "NumericDistribution",
    "Uniform",
    "Gaussian",
    "Poisson",
    "Gamma",
    "Beta",
]
