"""
Markov Process Interface
========================

:class:`MarkovProcess` describes a process by the distribution of the next
state given the current non-terminal state. Simulation is derived from it.
"""

from __future__ import annotations

__author__ = "rlmdp-core developers"
__copyright__ = "Copyright (c) 2026 rlmdp-core project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from rlmdp_core.markov.state import NonTerminal

if TYPE_CHECKING:
    from collections.abc import Iterator

    from rlmdp_core.distributions.distribution import Distribution
    from rlmdp_core.markov.state import State


class MarkovProcess[S](ABC):
    """Markov process over states wrapping values of type ``S``."""

    @abstractmethod
    def transition(self, state: NonTerminal[S]) -> Distribution[State[S]]:
        """
        Distribution of the next state given a non-terminal state.

        Parameters
        ----------
        state : NonTerminal
            Current state.
        """

    @staticmethod
    def is_terminal(state: State[S]) -> bool:
        return not isinstance(state, NonTerminal)

    def simulate(
        self, start_state_distribution: Distribution[NonTerminal[S]]
    ) -> Iterator[State[S]]:
        """
        Run one simulation of the process.

        Yields the start state, then each next state. The iterator stops
        right after yielding a terminal state and is infinite otherwise.

        Parameters
        ----------
        start_state_distribution : Distribution
            Distribution of the start state.
        """
        state: State[S] = start_state_distribution.sample()
        yield state

        while isinstance(state, NonTerminal):
            state = self.transition(state).sample()
            yield state

    def traces(
        self, start_state_distribution: Distribution[NonTerminal[S]]
    ) -> Iterator[Iterator[State[S]]]:
        """
        Infinite stream of independent simulations.

        Parameters
        ----------
        start_state_distribution : Distribution
            Distribution of the start state of every simulation.
        """
        while True:
            yield self.simulate(start_state_distribution)


__all__ = ["MarkovProcess"]
