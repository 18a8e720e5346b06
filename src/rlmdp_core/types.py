"""
Core Type Definitions
=====================

Fundamental types and aliases used throughout rlmdp-core.
"""

__author__ = "rlmdp-core developers"
__copyright__ = "Copyright (c) 2026 rlmdp-core project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from enum import StrEnum
from typing import Any

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of outcome space kinds.

    Attributes
    ----------
    DISCRETE : str
        Countable outcome space (finite tables, counts, states).
    CONTINUOUS : str
        Real-valued outcome space.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class ExpectationMethodName(StrEnum):
    """
    Names of the ways an expectation can be evaluated.

    Attributes
    ----------
    EXACT : str
        Weighted sum over a finite probability table.
    MONTE_CARLO : str
        Sample mean over independent draws.
    """

    EXACT = "exact"
    MONTE_CARLO = "monte_carlo"


NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

type OutcomeFunc[A] = Callable[[A], float]
"""Type alias for a real-valued function of an outcome."""


__all__ = [
    "Kind",
    "ExpectationMethodName",
    "NumPyNumber",
    "NumericArray",
    "OutcomeFunc",
]
