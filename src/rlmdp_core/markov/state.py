"""
Process States
==============

States of a Markov process are tagged as either terminal or non-terminal:

- :class:`State` — common base wrapping the underlying value.
- :class:`Terminal` — the process stops once it reaches this state.
- :class:`NonTerminal` — the process keeps transitioning from this state.

A terminal and a non-terminal state wrapping the same value are different
states.
"""

from __future__ import annotations

__author__ = "rlmdp-core developers"
__copyright__ = "Copyright (c) 2026 rlmdp-core project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True, slots=True)
class State[S]:
    """
    Base class of process states.

    Parameters
    ----------
    state
        Underlying (hashable) value of the state.
    """

    state: S

    @property
    def is_terminal(self) -> bool:
        return isinstance(self, Terminal)

    def on_non_terminal[X](self, f: Callable[[NonTerminal[S]], X], default: X) -> X:
        """
        Evaluate ``f`` on a non-terminal state, or return ``default``.

        Parameters
        ----------
        f : Callable
            Function of a non-terminal state.
        default
            Value returned for terminal states.
        """
        if isinstance(self, NonTerminal):
            return f(self)
        return default


@dataclass(frozen=True, slots=True)
class Terminal[S](State[S]):
    """State in which the process ends."""


@dataclass(frozen=True, slots=True)
class NonTerminal[S](State[S]):
    """State from which the process continues."""


__all__ = ["State", "Terminal", "NonTerminal"]
