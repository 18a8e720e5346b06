"""
rlmdp-core
==========

Reinforcement learning building blocks from first principles: probability
distributions, Markov processes and Markov reward processes, with example
processes from finance and operations.
"""

__author__ = "rlmdp-core developers"
__copyright__ = "Copyright (c) 2026 rlmdp-core project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .config import *
from .config import __all__ as _config_all
from .distributions import *
from .distributions import __all__ as _distr_all
from .markov import *
from .markov import __all__ as _markov_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("rlmdp-core")
__all__ = [
    "__version__",
    *_config_all,
    *_distr_all,
    *_markov_all,
    *_types_all,
]

del _config_all
del _distr_all
del _markov_all
del _types_all
