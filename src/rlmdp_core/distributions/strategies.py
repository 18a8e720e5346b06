"""
Expectation Strategies
======================

This module defines the pluggable strategy interface for expectations and its
default implementations:

- :class:`ExpectationStrategy` — resolves an :class:`ExpectationComputation`
  for a distribution.
- :class:`MonteCarloExpectationStrategy` — averages ``f`` over i.i.d. draws.
- :class:`ExactExpectationStrategy` — weighted sum over a finite probability
  table.

Notes
-----
- Strategies are lightweight and stateless apart from their configuration.
- The Monte Carlo sample size is resolved per call: ``sample_size`` option,
  then the strategy's own default, then :attr:`Settings.expectation_samples`.
"""

__author__ = "rlmdp-core developers"
__copyright__ = "Copyright (c) 2026 rlmdp-core project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from rlmdp_core.config import settings
from rlmdp_core.distributions.computation import ExpectationComputation
from rlmdp_core.types import ExpectationMethodName, OutcomeFunc

if TYPE_CHECKING:
    from .distribution import Distribution


@runtime_checkable
class SupportsTable[A](Protocol):
    """Anything exposing a finite probability table."""

    def table(self) -> Mapping[A, float]: ...


class ExpectationStrategy(Protocol):
    """Protocol for expectation resolution strategies."""

    def query_method(
        self, distr: "Distribution[Any]", **options: Any
    ) -> ExpectationComputation[Any]: ...


class MonteCarloExpectationStrategy:
    """
    Sample-mean estimator of ``E[f(X)]``.

    Parameters
    ----------
    sample_size : int or None, default None
        Default number of draws. ``None`` defers to the library settings.

    Raises
    ------
    ValueError
        If the resolved sample size is smaller than one.
    """

    def __init__(self, sample_size: int | None = None) -> None:
        if sample_size is not None and sample_size < 1:
            raise ValueError(f"sample_size must be positive, got {sample_size}")
        self.sample_size = sample_size

    def _resolve_sample_size(self, options: Mapping[str, Any]) -> int:
        n = options.get("sample_size")
        if n is None:
            n = self.sample_size
        if n is None:
            n = settings().expectation_samples
        if n < 1:
            raise ValueError(f"sample_size must be positive, got {n}")
        return int(n)

    def query_method(
        self, distr: "Distribution[Any]", **options: Any
    ) -> ExpectationComputation[Any]:
        """
        Build a Monte Carlo evaluator bound to ``distr``.

        Parameters
        ----------
        distr : Distribution
            Distribution to draw from.
        **options
            ``sample_size`` overrides the number of draws.

        Returns
        -------
        ExpectationComputation
            Evaluator tagged with :attr:`ExpectationMethodName.MONTE_CARLO`.
        """
        default_n = self._resolve_sample_size(options)

        def _monte_carlo(f: OutcomeFunc[Any], **call_options: Any) -> float:
            n = call_options.get("sample_size", default_n)
            if n < 1:
                raise ValueError(f"sample_size must be positive, got {n}")
            return distr.sample_n(int(n)).mean(f)

        return ExpectationComputation(method=ExpectationMethodName.MONTE_CARLO, func=_monte_carlo)


class ExactExpectationStrategy:
    """
    Exact expectation over a finite probability table.

    Raises
    ------
    TypeError
        If the distribution does not expose a ``table()``.
    """

    def query_method(
        self, distr: "Distribution[Any]", **options: Any
    ) -> ExpectationComputation[Any]:
        """
        Build an exact evaluator bound to the table of ``distr``.

        Parameters
        ----------
        distr : Distribution
            Finite distribution.
        **options
            Ignored; accepted for interface compatibility.

        Returns
        -------
        ExpectationComputation
            Evaluator tagged with :attr:`ExpectationMethodName.EXACT`.
        """
        if not isinstance(distr, SupportsTable):
            raise TypeError(
                f"{type(distr).__name__} has no probability table; "
                "exact expectation needs a finite distribution."
            )
        table = distr.table()

        def _exact(f: OutcomeFunc[Any], **_: Any) -> float:
            return sum(p * f(x) for x, p in table.items())

        return ExpectationComputation(method=ExpectationMethodName.EXACT, func=_exact)


__all__ = [
    "SupportsTable",
    "ExpectationStrategy",
    "MonteCarloExpectationStrategy",
    "ExactExpectationStrategy",
]
