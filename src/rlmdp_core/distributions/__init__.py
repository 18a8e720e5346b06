"""
Distributions subpackage

Interfaces and default implementations for probability distributions used by
rlmdp-core:

- distribution interface and sampled distributions (:mod:`.distribution`);
- finite distributions with probability tables (:mod:`.finite`);
- sampled numeric distributions (:mod:`.continuous`);
- expectation evaluators (:mod:`.computation`) and strategies
  (:mod:`.strategies`);
- sample containers (:mod:`.sampling`).
"""

from __future__ import annotations

__author__ = "rlmdp-core developers"
__copyright__ = "Copyright (c) 2026 rlmdp-core project"
__license__ = "SPDX-License-Identifier: MIT"

from .computation import ExpectationComputation
from .continuous import Beta, Gamma, Gaussian, NumericDistribution, Poisson, Uniform
from .distribution import Distribution, SampledDistribution
from .finite import (
    Bernoulli,
    Binomial,
    Categorical,
    Choose,
    Constant,
    FiniteDistribution,
    table_of,
)
from .sampling import OutcomeSample, Sample
from .strategies import (
    ExactExpectationStrategy,
    ExpectationStrategy,
    MonteCarloExpectationStrategy,
    SupportsTable,
)

__all__ = [
    # computation primitives
    "ExpectationComputation",
    # distributions
    "Distribution",
    "SampledDistribution",
    "FiniteDistribution",
    "Categorical",
    "Constant",
    "Bernoulli",
    "Choose",
    "Binomial",
    "table_of",
    "NumericDistribution",
    "Uniform",
    "Gaussian",
    "Poisson",
    "Gamma",
    "Beta",
    # sampling
    "Sample",
    "OutcomeSample",
    # strategies
    "SupportsTable",
    "ExpectationStrategy",
    "MonteCarloExpectationStrategy",
    "ExactExpectationStrategy",
]
