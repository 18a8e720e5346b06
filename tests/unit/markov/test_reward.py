from __future__ import annotations

__author__ = "rlmdp-core developers"
__copyright__ = "Copyright (c) 2026 rlmdp-core project"
__license__ = "SPDX-License-Identifier: MIT"

import itertools

import numpy as np
import pytest

from rlmdp_core.distributions import (
    Categorical,
    Choose,
    Constant,
    Distribution,
    Gaussian,
)
from rlmdp_core.markov import (
    FiniteMarkovRewardProcess,
    MarkovRewardProcess,
    NonTerminal,
    ReturnStep,
    State,
    Terminal,
    TransitionStep,
    returns,
)
from tests.unit.markov.test_basic import MarkovTestBase


class NoisyCountdown(MarkovRewardProcess[int]):
    """Countdown to zero paying a Gaussian reward on every step."""

    def transition_reward(self, state: NonTerminal[int]) -> Distribution[tuple[State[int], float]]:
        n = state.state - 1
        next_state: State[int] = Terminal(n) if n == 0 else NonTerminal(n)
        return Gaussian(1.0, 0.1).map(lambda reward: (next_state, reward))


def _steps(rewards: list[float]) -> list[TransitionStep[int]]:
    return [
        TransitionStep(NonTerminal(i), NonTerminal(i + 1), reward)
        for i, reward in enumerate(rewards)
    ]


class TestReturns:
    def test_add_return(self) -> None:
        step = TransitionStep(NonTerminal(0), Terminal(1), 2.0)
        annotated = step.add_return(0.5, 4.0)

        assert isinstance(annotated, ReturnStep)
        assert annotated.return_ == pytest.approx(4.0)
        assert (annotated.state, annotated.next_state, annotated.reward) == (
            NonTerminal(0),
            Terminal(1),
            2.0,
        )

    def test_finite_trace(self) -> None:
        result = list(returns(_steps([1.0, 2.0, 3.0]), gamma=0.5))

        assert [r.return_ for r in result] == pytest.approx([2.75, 3.5, 3.0])
        assert [r.reward for r in result] == [1.0, 2.0, 3.0]

    def test_undiscounted_finite_trace(self) -> None:
        result = list(returns(_steps([1.0, 1.0, 1.0, 1.0]), gamma=1.0))
        assert [r.return_ for r in result] == pytest.approx([4.0, 3.0, 2.0, 1.0])

    def test_empty_trace(self) -> None:
        assert list(returns([], gamma=0.9)) == []

    def test_infinite_trace_is_truncated(self) -> None:
        step = TransitionStep(NonTerminal(0), NonTerminal(0), 1.0)
        result = list(returns(itertools.repeat(step), gamma=0.5, tolerance=1e-6))

        # log(1e-6) / log(0.5) ~ 19.93
        assert len(result) == 20
        assert result[0].return_ == pytest.approx(2.0, abs=1e-6)
        assert result[-1].return_ == pytest.approx(2.0, abs=1e-5)

    def test_finite_trace_ending_at_horizon_is_kept_whole(self) -> None:
        # log(0.25) / log(0.5) = 2, so at most 4 steps are read
        result = list(returns(_steps([1.0, 1.0, 1.0, 1.0]), gamma=0.5, tolerance=0.25))

        assert [r.return_ for r in result] == pytest.approx([1.875, 1.75, 1.5, 1.0])

    def test_finite_trace_past_horizon_is_truncated(self) -> None:
        result = list(returns(_steps([1.0] * 5), gamma=0.5, tolerance=0.25))

        assert [r.return_ for r in result] == pytest.approx([1.875, 1.75])

    @pytest.mark.parametrize("gamma", [0.0, -0.5, 1.5])
    def test_invalid_gamma(self, gamma: float) -> None:
        with pytest.raises(ValueError, match="Discount factor"):
            list(returns(_steps([1.0]), gamma=gamma))

    def test_invalid_tolerance(self) -> None:
        with pytest.raises(ValueError, match="tolerance"):
            list(returns(_steps([1.0]), gamma=0.9, tolerance=0.0))


class TestMarkovRewardProcess:
    def test_transition_is_derived_from_transition_reward(self) -> None:
        process = NoisyCountdown()

        assert process.transition(NonTerminal(2)).sample() == NonTerminal(1)
        assert process.transition(NonTerminal(1)).sample() == Terminal(0)

    def test_simulate_reward(self) -> None:
        steps = list(NoisyCountdown().simulate_reward(Constant(NonTerminal(3))))

        assert [s.state for s in steps] == [NonTerminal(3), NonTerminal(2), NonTerminal(1)]
        assert steps[-1].next_state == Terminal(0)
        assert all(abs(s.reward - 1.0) < 1.0 for s in steps)

    def test_simulate_reward_from_terminal_start(self) -> None:
        steps = list(NoisyCountdown().simulate_reward(Constant(Terminal(0))))  # type: ignore[arg-type]
        assert steps == []

    def test_reward_traces(self) -> None:
        traces = NoisyCountdown().reward_traces(Choose([NonTerminal(1), NonTerminal(4)]))
        lengths = {len(list(t)) for t in itertools.islice(traces, 40)}
        assert lengths == {1, 4}


class TestFiniteMarkovRewardProcess(MarkovTestBase):
    def test_transition_reward_tags_states(self) -> None:
        process = self.make_reward_process()

        a = process.transition_reward(NonTerminal("a"))
        assert a.probability((NonTerminal("a"), 1.0)) == pytest.approx(0.5)
        assert a.probability((NonTerminal("b"), 2.0)) == pytest.approx(0.5)
        assert process.transition_reward(NonTerminal("b")) == Constant((Terminal("done"), 0.0))

    def test_transition_marginalises_reward(self) -> None:
        process = self.make_reward_process()

        assert process.transition(NonTerminal("a")) == Categorical(
            {NonTerminal("a"): 0.5, NonTerminal("b"): 0.5}
        )
        assert process.terminal_states == frozenset({Terminal("done")})

    def test_unknown_state(self) -> None:
        with pytest.raises(KeyError, match="Unknown non-terminal state"):
            self.make_reward_process().transition_reward(NonTerminal("z"))

    def test_reward_function(self) -> None:
        process = self.make_reward_process()

        np.testing.assert_allclose(process.reward_function_vec, [1.5, 0.0])
        assert process.get_reward_function() == pytest.approx(
            {NonTerminal("a"): 1.5, NonTerminal("b"): 0.0}
        )

    def test_value_function(self) -> None:
        process = self.make_reward_process()
        values = process.get_value_function(self.GAMMA)

        assert values[NonTerminal("a")] == pytest.approx(1.5 / 0.55)
        assert values[NonTerminal("b")] == pytest.approx(0.0)

    def test_value_function_satisfies_bellman_equation(self) -> None:
        process = self.make_reward_process()
        v = process.get_value_function_vec(self.GAMMA)
        p = process.get_transition_matrix()

        np.testing.assert_allclose(v, process.reward_function_vec + self.GAMMA * p @ v)

    def test_value_function_matches_simulated_returns(self) -> None:
        process = self.make_reward_process()
        start = Constant(NonTerminal("a"))

        first_returns = [
            next(returns(trace, self.GAMMA)).return_
            for trace in itertools.islice(process.reward_traces(start), 4000)
        ]
        assert float(np.mean(first_returns)) == pytest.approx(1.5 / 0.55, abs=0.1)

    @pytest.mark.parametrize("gamma", [0.0, 1.01])
    def test_invalid_gamma(self, gamma: float) -> None:
        with pytest.raises(ValueError, match="Discount factor"):
            self.make_reward_process().get_value_function_vec(gamma)

    def test_singular_system(self) -> None:
        process = FiniteMarkovRewardProcess({"x": Constant(("x", 1.0))})

        with pytest.raises(ValueError, match="undefined"):
            process.get_value_function_vec(1.0)

    def test_undiscounted_recurrent_chain(self) -> None:
        process = FiniteMarkovRewardProcess(
            {
                "x": Categorical({("x", 1.0): 0.7, ("y", 1.0): 0.2, ("z", 1.0): 0.1}),
                "y": Categorical({("x", 0.0): 1 / 3, ("y", 0.0): 1 / 3, ("z", 0.0): 1 / 3}),
                "z": Categorical({("x", 2.0): 0.15, ("y", 2.0): 0.35, ("z", 2.0): 0.5}),
            }
        )

        with pytest.raises(ValueError, match="undefined"):
            process.get_value_function_vec(1.0)
        assert np.all(np.isfinite(process.get_value_function_vec(0.9)))

    def test_undiscounted_value_function_with_terminal_state(self) -> None:
        values = self.make_reward_process().get_value_function(1.0)

        assert values[NonTerminal("a")] == pytest.approx(3.0)
        assert values[NonTerminal("b")] == pytest.approx(0.0)

    def test_display(self) -> None:
        process = self.make_reward_process()

        assert process.display_reward_function() == "a: 1.500\nb: 0.000"
        assert process.display_value_function(self.GAMMA) == "a: 2.727\nb: 0.000"
