"""
Mean-reverting stock price process.

Integer prices move one tick up or down each step. The probability of an up
move is a logistic function of the distance between a reference level and the
current price, pulling the price back towards the level.
"""

from __future__ import annotations

__author__ = "rlmdp-core developers"
__copyright__ = "Copyright (c) 2026 rlmdp-core project"
__license__ = "SPDX-License-Identifier: MIT"

from scipy.special import expit

from rlmdp_core.distributions.finite import Categorical
from rlmdp_core.markov.process import MarkovProcess
from rlmdp_core.markov.registry import ProcessRegister, ProcessSpec
from rlmdp_core.markov.state import NonTerminal

STOCK_PRICE_MEAN_REVERSION = "StockPriceMeanReversion"


class StockPriceMeanReversion(MarkovProcess[int]):
    """
    Parameters
    ----------
    level_param : int
        Reference price the process reverts to.
    alpha : float, default 0.25
        Strength of the reversion. ``0`` gives a symmetric random walk.

    Raises
    ------
    ValueError
        If ``alpha`` is negative.
    """

    def __init__(self, level_param: int, alpha: float = 0.25) -> None:
        if alpha < 0:
            raise ValueError(f"alpha must be non-negative, got {alpha}")
        self.level_param = level_param
        self.alpha = alpha

    def up_prob(self, price: int) -> float:
        """Probability that the next move from ``price`` is up."""
        return float(expit(self.alpha * (self.level_param - price)))

    def transition(self, state: NonTerminal[int]) -> Categorical[NonTerminal[int]]:
        price = state.state
        up_p = self.up_prob(price)
        return Categorical({NonTerminal(price + 1): up_p, NonTerminal(price - 1): 1.0 - up_p})

    def __repr__(self) -> str:
        return f"StockPriceMeanReversion(level_param={self.level_param}, alpha={self.alpha})"


def configure_stock_price_mean_reversion() -> None:
    """
    Register the mean-reverting stock price process.
    """
    if ProcessRegister.contains(STOCK_PRICE_MEAN_REVERSION):
        return

    ProcessRegister.register(
        ProcessSpec(
            name=STOCK_PRICE_MEAN_REVERSION,
            factory=StockPriceMeanReversion,
            description="Integer price random walk pulled towards a reference level.",
        )
    )


__all__ = [
    "STOCK_PRICE_MEAN_REVERSION",
    "StockPriceMeanReversion",
    "configure_stock_price_mean_reversion",
]
