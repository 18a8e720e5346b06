"""
Sampling Interfaces
===================

This module defines protocols and implementations for sample containers
returned by :meth:`Distribution.sample_n`.
"""

from __future__ import annotations

__author__ = "rlmdp-core developers"
__copyright__ = "Copyright (c) 2026 rlmdp-core project"
__license__ = "SPDX-License-Identifier: MIT"

from collections import Counter
from typing import TYPE_CHECKING, Protocol

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from rlmdp_core.types import NumericArray, OutcomeFunc


class Sample[A](Protocol):
    """
    Protocol for sample containers.

    Attributes
    ----------
    outcomes : tuple
        Drawn outcomes in draw order.
    """

    def __len__(self) -> int: ...
    @property
    def outcomes(self) -> tuple[A, ...]: ...


class OutcomeSample[A]:
    """
    Immutable container of drawn outcomes.

    Outcomes may be of any type (numbers, states, tuples). Numeric views are
    available through :attr:`array`.

    Parameters
    ----------
    outcomes : Iterable
        Drawn outcomes, in draw order.
    """

    __slots__ = ("_outcomes",)

    def __init__(self, outcomes: Iterable[A]) -> None:
        self._outcomes: tuple[A, ...] = tuple(outcomes)

    def __len__(self) -> int:
        """Return the number of outcomes."""
        return len(self._outcomes)

    def __iter__(self) -> Iterator[A]:
        """Iterate over outcomes in draw order."""
        return iter(self._outcomes)

    def __getitem__(self, index: int) -> A:
        return self._outcomes[index]

    def __repr__(self) -> str:
        return f"OutcomeSample(n={len(self)})"

    @property
    def outcomes(self) -> tuple[A, ...]:
        """Return the outcomes as a tuple."""
        return self._outcomes

    @property
    def array(self) -> NumericArray:
        """
        Return the outcomes as a NumPy array.

        Raises
        ------
        ValueError
            If the outcomes cannot be represented as a numeric array.
        """
        arr = np.asarray(self._outcomes)
        if arr.dtype.kind not in "biuf":
            raise ValueError(f"Outcomes of dtype '{arr.dtype}' are not numeric.")
        return arr

    def counts(self) -> Counter[A]:
        """Count occurrences of each distinct outcome."""
        return Counter(self._outcomes)

    def frequencies(self) -> dict[A, float]:
        """
        Empirical probability table of the sample.

        Returns
        -------
        dict
            Outcome to relative frequency. Empty for an empty sample.
        """
        n = len(self._outcomes)
        if n == 0:
            return {}
        return {outcome: count / n for outcome, count in self.counts().items()}

    def mean(self, f: OutcomeFunc[A] | None = None) -> float:
        """
        Sample mean of ``f(x)``, or of the outcomes when ``f`` is omitted.

        Raises
        ------
        ValueError
            If the sample is empty.
        """
        if not self._outcomes:
            raise ValueError("Cannot take the mean of an empty sample.")
        if f is None:
            return float(np.mean(self.array))
        return float(np.mean([f(x) for x in self._outcomes]))


__all__ = ["Sample", "OutcomeSample"]
