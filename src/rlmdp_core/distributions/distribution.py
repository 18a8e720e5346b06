"""
Distribution Interface and Sampled Distributions
================================================

This module defines the public :class:`Distribution` base class and a concrete
distribution defined only by a way to sample it:

- :class:`Distribution` — abstract interface used throughout the library.
- :class:`SampledDistribution` — wraps a zero-argument sampler.

Notes
-----
- :meth:`Distribution.map` and :meth:`Distribution.apply` return sampled
  distributions by default; finite distributions override both to stay exact.
- Expectations are resolved through :attr:`Distribution.expectation_strategy`
  (Monte Carlo unless overridden).
"""

from __future__ import annotations

__author__ = "rlmdp-core developers"
__copyright__ = "Copyright (c) 2026 rlmdp-core project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from rlmdp_core.distributions.sampling import OutcomeSample
from rlmdp_core.distributions.strategies import MonteCarloExpectationStrategy
from rlmdp_core.types import Kind

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from typing import Any

    from rlmdp_core.distributions.computation import ExpectationComputation
    from rlmdp_core.distributions.strategies import ExpectationStrategy
    from rlmdp_core.types import OutcomeFunc


class Distribution[A](ABC):
    """Probability distribution that can be sampled."""

    @abstractmethod
    def sample(self) -> A:
        """Return a single random draw."""

    @property
    def kind(self) -> Kind:
        """Kind of the outcome space."""
        return Kind.CONTINUOUS

    @property
    def expectation_strategy(self) -> ExpectationStrategy:
        """Strategy used by :meth:`expectation`."""
        return MonteCarloExpectationStrategy()

    def sample_n(self, n: int) -> OutcomeSample[A]:
        """
        Draw ``n`` independent outcomes.

        Parameters
        ----------
        n : int
            Number of draws.

        Returns
        -------
        OutcomeSample
            Outcomes in draw order.

        Raises
        ------
        ValueError
            If ``n`` is negative.
        """
        if n < 0:
            raise ValueError(f"Number of draws must be non-negative, got {n}")
        return OutcomeSample(self.sample() for _ in range(n))

    def sample_iter(self) -> Iterator[A]:
        """Infinite iterator of independent draws."""
        while True:
            yield self.sample()

    def map[B](self, f: Callable[[A], B]) -> Distribution[B]:
        """
        Distribution of ``f(X)``.

        Parameters
        ----------
        f : Callable
            Function applied to every outcome.
        """
        return SampledDistribution(lambda: f(self.sample()))

    def apply[B](self, f: Callable[[A], Distribution[B]]) -> Distribution[B]:
        """
        Dependent composition: draw ``x`` from this distribution, then draw
        from ``f(x)``.

        Parameters
        ----------
        f : Callable
            Function returning the conditional distribution of the next
            outcome.
        """
        return SampledDistribution(lambda: f(self.sample()).sample())

    def query_expectation(self, **options: Any) -> ExpectationComputation[A]:
        return self.expectation_strategy.query_method(self, **options)

    def expectation(self, f: OutcomeFunc[A], **options: Any) -> float:
        """
        Expected value of ``f(X)``.

        Parameters
        ----------
        f : Callable
            Real-valued function of an outcome.
        **options
            Passed to the expectation strategy (e.g. ``sample_size``).
        """
        return self.query_expectation(**options)(f)


class SampledDistribution[A](Distribution[A]):
    """
    Distribution defined by a function that samples it.

    Parameters
    ----------
    sampler : Callable[[], A]
        Zero-argument function returning one draw.
    expectation_samples : int or None, default None
        Default Monte Carlo sample size for :meth:`expectation`. ``None``
        defers to the library settings.
    """

    def __init__(self, sampler: Callable[[], A], expectation_samples: int | None = None) -> None:
        self.sampler = sampler
        self._expectation_strategy = MonteCarloExpectationStrategy(expectation_samples)

    @property
    def expectation_samples(self) -> int | None:
        return self._expectation_strategy.sample_size

    @property
    def expectation_strategy(self) -> ExpectationStrategy:
        return self._expectation_strategy

    def sample(self) -> A:
        return self.sampler()


__all__ = ["Distribution", "SampledDistribution"]
