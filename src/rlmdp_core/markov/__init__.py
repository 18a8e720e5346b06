"""
Markov processes module.

States, Markov processes and Markov reward processes (general and finite),
discounted returns, and a registry of built-in example processes.
"""

__author__ = "rlmdp-core developers"
__copyright__ = "Copyright (c) 2026 rlmdp-core project"
__license__ = "SPDX-License-Identifier: MIT"

from .configuration import configure_process_register, reset_process_register
from .finite import FiniteMarkovProcess
from .process import MarkovProcess
from .registry import ProcessRegister, ProcessSpec
from .reward import (
    FiniteMarkovRewardProcess,
    MarkovRewardProcess,
    ReturnStep,
    TransitionStep,
    returns,
)
from .state import NonTerminal, State, Terminal

__all__ = [
    "State",
    "Terminal",
    "NonTerminal",
    "MarkovProcess",
    "FiniteMarkovProcess",
    "MarkovRewardProcess",
    "FiniteMarkovRewardProcess",
    "TransitionStep",
    "ReturnStep",
    "returns",
    "ProcessRegister",
    "ProcessSpec",
    "configure_process_register",
    "reset_process_register",
]
