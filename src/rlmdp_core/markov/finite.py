"""
Finite Markov Processes
=======================

:class:`FiniteMarkovProcess` is a Markov process with a finite state space
whose transitions are finite distributions. This allows tabular treatment:

- :meth:`FiniteMarkovProcess.get_transition_matrix` — transition probabilities
  between non-terminal states as a dense matrix.
- :meth:`FiniteMarkovProcess.get_stationary_distribution` — the distribution
  left invariant by the transitions.

Notes
-----
- States that appear as keys of the transition map are non-terminal; any
  other state reachable from them is terminal.
"""

from __future__ import annotations

__author__ = "rlmdp-core developers"
__copyright__ = "Copyright (c) 2026 rlmdp-core project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np
from scipy import linalg as _sp_linalg

from rlmdp_core.distributions.finite import Categorical
from rlmdp_core.markov.process import MarkovProcess
from rlmdp_core.markov.state import NonTerminal, Terminal

if TYPE_CHECKING:
    from collections.abc import Mapping

    from rlmdp_core.distributions.finite import FiniteDistribution
    from rlmdp_core.markov.state import State
    from rlmdp_core.types import NumericArray


EIGENVALUE_TOLERANCE = 1e-8


class FiniteMarkovProcess[S](MarkovProcess[S]):
    """
    Markov process with a finite state space.

    Parameters
    ----------
    transition_map : Mapping[S, FiniteDistribution[S]]
        Next-state distribution for every non-terminal state value.
    """

    non_terminal_states: list[NonTerminal[S]]
    transition_map: Mapping[NonTerminal[S], FiniteDistribution[State[S]]]

    def __init__(self, transition_map: Mapping[S, FiniteDistribution[S]]) -> None:
        self._non_terminal_values = frozenset(transition_map)
        self.transition_map = {
            NonTerminal(s): distribution.map(self._tag)
            for s, distribution in transition_map.items()
        }
        self.non_terminal_states = list(self.transition_map)

    def _tag(self, s: S) -> State[S]:
        return NonTerminal(s) if s in self._non_terminal_values else Terminal(s)

    @property
    def terminal_states(self) -> frozenset[Terminal[S]]:
        """Terminal states reachable in one step from some non-terminal state."""
        return frozenset(
            s
            for distribution in self.transition_map.values()
            for s in distribution.support
            if isinstance(s, Terminal)
        )

    def transition(self, state: NonTerminal[S]) -> FiniteDistribution[State[S]]:
        """
        Next-state distribution of ``state``.

        Raises
        ------
        KeyError
            If ``state`` is not a non-terminal state of this process.
        """
        try:
            return self.transition_map[state]
        except KeyError as exc:
            raise KeyError(f"Unknown non-terminal state {state!r}") from exc

    def get_transition_matrix(self) -> NumericArray:
        """
        Transition probabilities between non-terminal states.

        Returns
        -------
        numpy.ndarray
            ``(n, n)`` matrix whose entry ``(i, j)`` is the probability of
            moving from ``non_terminal_states[i]`` to ``non_terminal_states[j]``.
            Probability mass flowing into terminal states is not represented,
            so rows may sum to less than one.
        """
        index = {s: i for i, s in enumerate(self.non_terminal_states)}
        matrix = np.zeros((len(index), len(index)))
        for i, s in enumerate(self.non_terminal_states):
            for next_state, p in self.transition_map[s].table().items():
                j = index.get(next_state)  # type: ignore[call-overload]
                if j is not None:
                    matrix[i, j] = p
        return matrix

    def get_stationary_distribution(self) -> FiniteDistribution[S]:
        """
        Stationary distribution over non-terminal state values.

        Computed from the left eigenvector of the transition matrix for the
        eigenvalue closest to one. For reducible processes with several
        invariant distributions any one of them may be returned.

        Raises
        ------
        ValueError
            If the process has terminal states, or no eigenvalue of the
            transition matrix equals one.
        """
        if self.terminal_states:
            raise ValueError(
                "Stationary distribution is undefined for processes with terminal states."
            )

        eigenvalues, left_vectors = _sp_linalg.eig(
            self.get_transition_matrix(), left=True, right=False
        )
        idx = int(np.argmin(np.abs(eigenvalues - 1.0)))
        if abs(eigenvalues[idx] - 1.0) > EIGENVALUE_TOLERANCE:
            raise ValueError("Transition matrix has no eigenvalue equal to one.")

        vector = np.real(left_vectors[:, idx])
        vector = np.clip(vector / vector.sum(), 0.0, None)
        vector = vector / vector.sum()
        return Categorical(
            {s.state: float(p) for s, p in zip(self.non_terminal_states, vector, strict=True)}
        )

    def display(self) -> str:
        """Human-readable listing of all transitions."""
        lines: list[str] = []
        for s, distribution in self.transition_map.items():
            lines.append(f"From State {s.state}:")
            for next_state, p in distribution.table().items():
                tag = "Terminal State" if isinstance(next_state, Terminal) else "State"
                lines.append(f"  To {tag} {next_state.state} with Probability {p:.3f}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return self.display()


__all__ = ["FiniteMarkovProcess"]
