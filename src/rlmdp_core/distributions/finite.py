"""
Finite Distributions
====================

Distributions over finitely many outcomes, which can be rendered as a
probability table:

- :class:`FiniteDistribution` — abstract base with exact ``map``, ``apply``
  and ``expectation``.
- :class:`Categorical` — arbitrary table (normalised on construction).
- :class:`Constant` — a single certain outcome.
- :class:`Bernoulli` — ``True`` with probability ``p``.
- :class:`Choose` — uniform over a collection.
- :class:`Binomial` — number of successes in ``n`` Bernoulli trials.

Notes
-----
- Outcomes must be hashable.
- Sampling uses the shared generator from :func:`rlmdp_core.config.random_generator`.
"""

from __future__ import annotations

__author__ = "rlmdp-core developers"
__copyright__ = "Copyright (c) 2026 rlmdp-core project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings
from abc import abstractmethod
from collections import defaultdict
from typing import TYPE_CHECKING

import numpy as np
from scipy.stats import binom

from rlmdp_core.config import random_generator, settings
from rlmdp_core.distributions.distribution import Distribution
from rlmdp_core.distributions.strategies import ExactExpectationStrategy
from rlmdp_core.types import Kind

if TYPE_CHECKING:
    from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
    from typing import Any

    from rlmdp_core.distributions.strategies import ExpectationStrategy
    from rlmdp_core.types import NumericArray


def _draw_from_cumulative[A](outcomes: Sequence[A], cumulative: NumericArray) -> A:
    """Pick an outcome by inverting the cumulative weights."""
    u = random_generator().random() * cumulative[-1]
    idx = int(np.searchsorted(cumulative, u, side="right"))
    return outcomes[min(idx, len(outcomes) - 1)]


class FiniteDistribution[A](Distribution[A]):
    """
    Probability distribution with a finite number of outcomes.

    Subclasses implement :meth:`table`; sampling, mapping, composition and
    expectations are derived from it exactly.
    """

    @abstractmethod
    def table(self) -> Mapping[A, float]:
        """Return the probability of every outcome in the support."""

    @property
    def kind(self) -> Kind:
        return Kind.DISCRETE

    @property
    def expectation_strategy(self) -> ExpectationStrategy:
        return ExactExpectationStrategy()

    @property
    def support(self) -> frozenset[A]:
        """Outcomes with positive probability."""
        return frozenset(x for x, p in self.table().items() if p > 0)

    def probability(self, outcome: A) -> float:
        """
        Probability of ``outcome`` (zero if it is not in the table).
        """
        return float(self.table().get(outcome, 0.0))

    def sample(self) -> A:
        table = self.table()
        return _draw_from_cumulative(list(table), np.cumsum(list(table.values())))

    def map[B](self, f: Callable[[A], B]) -> FiniteDistribution[B]:
        """
        Distribution of ``f(X)``.

        Outcomes mapped to the same value have their probabilities merged.
        """
        return Categorical(table_of((f(x), p) for x, p in self.table().items()))

    def apply[B](self, f: Callable[[A], Distribution[B]]) -> Distribution[B]:
        """
        Dependent composition, exact when every ``f(x)`` is finite.

        Falls back to a sampled distribution as soon as one conditional
        distribution is not finite.
        """
        conditionals = [(f(x), p) for x, p in self.table().items()]
        if not all(isinstance(d, FiniteDistribution) for d, _ in conditionals):
            return super().apply(f)

        return Categorical(
            table_of(
                (y, p * q)
                for d, p in conditionals
                for y, q in d.table().items()  # type: ignore[attr-defined]
            )
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FiniteDistribution):
            return NotImplemented
        tol = settings().probability_tolerance
        mine = {x: p for x, p in self.table().items() if p > tol}
        theirs = {x: p for x, p in other.table().items() if p > tol}
        if mine.keys() != theirs.keys():
            return False
        return all(math.isclose(p, theirs[x], abs_tol=tol) for x, p in mine.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.table())!r})"


class Categorical[A](FiniteDistribution[A]):
    """
    Finite distribution given by an explicit table.

    Parameters
    ----------
    distribution : Mapping
        Outcome to non-negative weight. Weights are normalised to sum to one;
        zero-weight outcomes are dropped.

    Raises
    ------
    ValueError
        If a weight is negative or all weights are zero.

    Warns
    -----
    UserWarning
        If the weights sum to something other than one (beyond the
        configured tolerance) and had to be normalised.
    """

    def __init__(self, distribution: Mapping[A, float]) -> None:
        weights = {x: float(p) for x, p in distribution.items()}
        negative = [x for x, p in weights.items() if p < 0 or math.isnan(p)]
        if negative:
            raise ValueError(f"Probabilities must be non-negative, invalid weights for {negative}")

        total = math.fsum(weights.values())
        if total <= 0:
            raise ValueError("Probabilities must not all be zero.")

        if abs(total - 1.0) > settings().probability_tolerance:
            warnings.warn(
                f"Probabilities sum to {total}, normalising to 1.",
                UserWarning,
                stacklevel=2,
            )

        self._table: dict[A, float] = {x: p / total for x, p in weights.items() if p > 0}
        self._outcomes = list(self._table)
        self._cumulative = np.cumsum(list(self._table.values()))

    def table(self) -> Mapping[A, float]:
        return self._table

    def sample(self) -> A:
        return _draw_from_cumulative(self._outcomes, self._cumulative)


class Constant[A](FiniteDistribution[A]):
    """
    Distribution with a single outcome of probability one.

    Parameters
    ----------
    value
        The certain outcome.
    """

    def __init__(self, value: A) -> None:
        self.value = value

    def table(self) -> Mapping[A, float]:
        return {self.value: 1.0}

    def sample(self) -> A:
        return self.value

    def __repr__(self) -> str:
        return f"Constant({self.value!r})"


class Bernoulli(FiniteDistribution[bool]):
    """
    ``True`` with probability ``p``, ``False`` otherwise.

    Raises
    ------
    ValueError
        If ``p`` is outside ``[0, 1]``.
    """

    def __init__(self, p: float) -> None:
        if not 0.0 <= p <= 1.0:
            raise ValueError(f"Bernoulli probability must be in [0, 1], got {p}")
        self.p = float(p)

    def table(self) -> Mapping[bool, float]:
        return {x: q for x, q in ((True, self.p), (False, 1.0 - self.p)) if q > 0}

    def sample(self) -> bool:
        return bool(random_generator().random() < self.p)

    def __repr__(self) -> str:
        return f"Bernoulli(p={self.p})"


class Choose[A](FiniteDistribution[A]):
    """
    Uniform distribution over a finite collection.

    Parameters
    ----------
    options : Iterable
        Candidate outcomes. Duplicates collapse into a single outcome.

    Raises
    ------
    ValueError
        If ``options`` is empty.
    """

    def __init__(self, options: Iterable[A]) -> None:
        self.options: tuple[A, ...] = tuple(dict.fromkeys(options))
        if not self.options:
            raise ValueError("Choose needs at least one option.")

    def table(self) -> Mapping[A, float]:
        p = 1.0 / len(self.options)
        return {x: p for x in self.options}

    def sample(self) -> A:
        return self.options[int(random_generator().integers(len(self.options)))]

    def __repr__(self) -> str:
        return f"Choose({list(self.options)!r})"


class Binomial(FiniteDistribution[int]):
    """
    Number of successes in ``n`` independent trials with success probability ``p``.

    Raises
    ------
    ValueError
        If ``n`` is negative or ``p`` is outside ``[0, 1]``.
    """

    def __init__(self, n: int, p: float) -> None:
        if n < 0:
            raise ValueError(f"Number of trials must be non-negative, got {n}")
        if not 0.0 <= p <= 1.0:
            raise ValueError(f"Success probability must be in [0, 1], got {p}")
        self.n = int(n)
        self.p = float(p)
        pmf = binom.pmf(np.arange(self.n + 1), self.n, self.p)
        self._table = {k: float(q) for k, q in enumerate(pmf) if q > 0}

    def table(self) -> Mapping[int, float]:
        return self._table

    def sample(self) -> int:
        return int(random_generator().binomial(self.n, self.p))

    def __repr__(self) -> str:
        return f"Binomial(n={self.n}, p={self.p})"


def table_of(outcomes: Iterable[tuple[Hashable, float]]) -> dict[Any, float]:
    """
    Merge ``(outcome, probability)`` pairs into a table, summing duplicates.
    """
    result: dict[Any, float] = defaultdict(float)
    for x, p in outcomes:
        result[x] += p
    return dict(result)


__all__ = [
    "FiniteDistribution",
    "Categorical",
    "Constant",
    "Bernoulli",
    "Choose",
    "Binomial",
    "table_of",
]
