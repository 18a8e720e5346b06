"""
Expectation Computations
========================

This module defines the callable produced when an expectation is resolved for
a distribution:

- :class:`ExpectationComputation` — a ready-to-call evaluator of
  ``E[f(X)]`` tagged with the method that produced it.

Notes
-----
- ``**options`` are free-form and forwarded by the caller (e.g.
  ``sample_size`` for Monte Carlo evaluation).
"""

__author__ = "rlmdp-core developers"
__copyright__ = "Copyright (c) 2026 rlmdp-core project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from mypy_extensions import KwArg

from rlmdp_core.types import ExpectationMethodName, OutcomeFunc


@dataclass(frozen=True, slots=True)
class ExpectationComputation[A]:
    """Evaluator of ``E[f(X)]`` for a fixed distribution.

    Parameters
    ----------
    method : ExpectationMethodName
        How the expectation is evaluated.
    func : Callable[[OutcomeFunc, KwArg(Any)], float]
        Callable taking the outcome function and options.
    """

    method: ExpectationMethodName
    func: Callable[[OutcomeFunc[A], KwArg(Any)], float]

    def __call__(self, f: OutcomeFunc[A], **options: Any) -> float:
        """Evaluate the expectation of ``f``."""
        return float(self.func(f, **options))


__all__ = ["ExpectationComputation"]
