"""
Markov Reward Processes
=======================

A Markov reward process attaches a real-valued reward to every transition:

- :class:`TransitionStep` / :class:`ReturnStep` — one simulated transition,
  optionally annotated with its discounted return.
- :func:`returns` — discounted returns along a simulated trace.
- :class:`MarkovRewardProcess` — interface defined by the joint distribution
  of next state and reward.
- :class:`FiniteMarkovRewardProcess` — finite version with an exact value
  function.
"""

from __future__ import annotations

__author__ = "rlmdp-core developers"
__copyright__ = "Copyright (c) 2026 rlmdp-core project"
__license__ = "SPDX-License-Identifier: MIT"

import itertools
import math
from abc import abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from rlmdp_core.markov.finite import FiniteMarkovProcess
from rlmdp_core.markov.process import MarkovProcess
from rlmdp_core.markov.state import NonTerminal

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from rlmdp_core.distributions.distribution import Distribution
    from rlmdp_core.distributions.finite import FiniteDistribution
    from rlmdp_core.markov.state import State
    from rlmdp_core.types import NumericArray


@dataclass(frozen=True, slots=True)
class TransitionStep[S]:
    """
    A single transition of a reward process.

    Parameters
    ----------
    state : NonTerminal
        State the transition starts from.
    next_state : State
        State the transition lands in.
    reward : float
        Reward collected on the transition.
    """

    state: NonTerminal[S]
    next_state: State[S]
    reward: float

    def add_return(self, gamma: float, return_: float) -> ReturnStep[S]:
        """
        Annotate the step with its return given the return of the next step.

        Parameters
        ----------
        gamma : float
            Discount factor.
        return_ : float
            Return from ``next_state`` onwards.
        """
        return ReturnStep(
            state=self.state,
            next_state=self.next_state,
            reward=self.reward,
            return_=self.reward + gamma * return_,
        )


@dataclass(frozen=True, slots=True)
class ReturnStep[S](TransitionStep[S]):
    """Transition step annotated with the discounted return from ``state``."""

    return_: float


def _validate_gamma(gamma: float) -> None:
    if not 0.0 < gamma <= 1.0:
        raise ValueError(f"Discount factor must be in (0, 1], got {gamma}")


def returns[S](
    trace: Iterable[TransitionStep[S]], gamma: float, tolerance: float = 1e-6
) -> Iterator[ReturnStep[S]]:
    """
    Discounted returns for every step of a trace.

    For ``gamma < 1`` the trace may be infinite: it is cut after
    ``2 * log(tolerance) / log(gamma)`` steps and only the first half of the
    returns, whose truncation error stays below ``tolerance``, is produced.
    For ``gamma == 1`` the trace must be finite.

    Parameters
    ----------
    trace : Iterable[TransitionStep]
        Transitions in simulation order.
    gamma : float
        Discount factor in ``(0, 1]``.
    tolerance : float, default 1e-6
        Truncation threshold for discounted tails.

    Raises
    ------
    ValueError
        If ``gamma`` is outside ``(0, 1]`` or ``tolerance`` is not positive.
    """
    _validate_gamma(gamma)
    if tolerance <= 0:
        raise ValueError(f"tolerance must be positive, got {tolerance}")

    max_steps = max(1, round(math.log(tolerance) / math.log(gamma))) if gamma < 1 else None
    if max_steps is None:
        steps = list(trace)
        truncated = False
    else:
        # one step past the horizon tells a cut trace from one ending exactly there
        steps = list(itertools.islice(trace, 2 * max_steps + 1))
        truncated = len(steps) > 2 * max_steps
        del steps[2 * max_steps :]

    result: list[ReturnStep[S]] = []
    next_return = 0.0
    for step in reversed(steps):
        annotated = step.add_return(gamma, next_return)
        result.append(annotated)
        next_return = annotated.return_
    result.reverse()

    if truncated:
        result = result[:max_steps]
    return iter(result)


class MarkovRewardProcess[S](MarkovProcess[S]):
    """Markov process with a reward attached to each transition."""

    @abstractmethod
    def transition_reward(self, state: NonTerminal[S]) -> Distribution[tuple[State[S], float]]:
        """
        Joint distribution of next state and reward given a non-terminal state.
        """

    def transition(self, state: NonTerminal[S]) -> Distribution[State[S]]:
        return self.transition_reward(state).map(lambda pair: pair[0])

    def simulate_reward(
        self, start_state_distribution: Distribution[NonTerminal[S]]
    ) -> Iterator[TransitionStep[S]]:
        """
        Run one simulation, yielding transitions until a terminal state.

        Parameters
        ----------
        start_state_distribution : Distribution
            Distribution of the start state.
        """
        state: State[S] = start_state_distribution.sample()
        while isinstance(state, NonTerminal):
            next_state, reward = self.transition_reward(state).sample()
            yield TransitionStep(state, next_state, reward)
            state = next_state

    def reward_traces(
        self, start_state_distribution: Distribution[NonTerminal[S]]
    ) -> Iterator[Iterator[TransitionStep[S]]]:
        """Infinite stream of independent reward simulations."""
        while True:
            yield self.simulate_reward(start_state_distribution)


class FiniteMarkovRewardProcess[S](FiniteMarkovProcess[S], MarkovRewardProcess[S]):
    """
    Finite Markov reward process.

    Parameters
    ----------
    transition_reward_map : Mapping[S, FiniteDistribution[tuple[S, float]]]
        Joint distribution of ``(next state value, reward)`` for every
        non-terminal state value.
    """

    transition_reward_map: Mapping[NonTerminal[S], FiniteDistribution[tuple[State[S], float]]]
    reward_function_vec: NumericArray

    def __init__(
        self, transition_reward_map: Mapping[S, FiniteDistribution[tuple[S, float]]]
    ) -> None:
        super().__init__(
            {s: d.map(lambda pair: pair[0]) for s, d in transition_reward_map.items()}
        )
        self.transition_reward_map = {
            NonTerminal(s): d.map(lambda pair: (self._tag(pair[0]), pair[1]))
            for s, d in transition_reward_map.items()
        }
        self.reward_function_vec = np.array(
            [
                self.transition_reward_map[s].expectation(lambda pair: pair[1])
                for s in self.non_terminal_states
            ]
        )

    def transition_reward(
        self, state: NonTerminal[S]
    ) -> FiniteDistribution[tuple[State[S], float]]:
        """
        Joint next-state/reward distribution of ``state``.

        Raises
        ------
        KeyError
            If ``state`` is not a non-terminal state of this process.
        """
        try:
            return self.transition_reward_map[state]
        except KeyError as exc:
            raise KeyError(f"Unknown non-terminal state {state!r}") from exc

    def get_reward_function(self) -> dict[NonTerminal[S], float]:
        """Expected immediate reward of every non-terminal state."""
        rewards = self.reward_function_vec
        return {s: float(r) for s, r in zip(self.non_terminal_states, rewards, strict=True)}

    def get_value_function_vec(self, gamma: float) -> NumericArray:
        """
        Exact value function, solving ``(I - gamma * P) V = R``.

        Parameters
        ----------
        gamma : float
            Discount factor in ``(0, 1]``.

        Returns
        -------
        numpy.ndarray
            Values in the order of :attr:`non_terminal_states`.

        Raises
        ------
        ValueError
            If ``gamma`` is outside ``(0, 1]`` or the linear system is
            singular (e.g. ``gamma == 1`` without reachable terminal states).
        """
        _validate_gamma(gamma)
        if gamma == 1.0 and not self.terminal_states:
            raise ValueError(
                "Value function is undefined for gamma=1.0: no terminal state is reachable."
            )

        n = len(self.non_terminal_states)
        system = np.eye(n) - gamma * self.get_transition_matrix()
        # rounding can leave I - gamma * P just off singular, so solve() would not raise
        if np.linalg.cond(system) > 1.0 / np.finfo(float).eps:
            raise ValueError(
                f"Value function is undefined for gamma={gamma}: the linear system is singular."
            )
        try:
            return np.linalg.solve(system, self.reward_function_vec)
        except np.linalg.LinAlgError as exc:
            raise ValueError(f"Value function is undefined for gamma={gamma}: {exc}") from exc

    def get_value_function(self, gamma: float) -> dict[NonTerminal[S], float]:
        """Exact value function keyed by non-terminal state."""
        values = self.get_value_function_vec(gamma)
        return {s: float(v) for s, v in zip(self.non_terminal_states, values, strict=True)}

    def display_reward_function(self) -> str:
        return "\n".join(f"{s.state}: {r:.3f}" for s, r in self.get_reward_function().items())

    def display_value_function(self, gamma: float) -> str:
        return "\n".join(f"{s.state}: {v:.3f}" for s, v in self.get_value_function(gamma).items())


__all__ = [
    "TransitionStep",
    "ReturnStep",
    "returns",
    "MarkovRewardProcess",
    "FiniteMarkovRewardProcess",
]
