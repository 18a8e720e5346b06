"""
Simple inventory Markov reward process.

A single store orders stock every evening to bring its inventory position up
to a fixed capacity; the order arrives 36 hours later. Daily demand is Poisson.
The store pays a holding cost per unit held overnight and a stockout cost per
unit of unmet demand.
"""

from __future__ import annotations

__author__ = "rlmdp-core developers"
__copyright__ = "Copyright (c) 2026 rlmdp-core project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass

from scipy.stats import poisson

from rlmdp_core.distributions.finite import Categorical
from rlmdp_core.markov.registry import ProcessRegister, ProcessSpec
from rlmdp_core.markov.reward import FiniteMarkovRewardProcess

SIMPLE_INVENTORY = "SimpleInventory"


@dataclass(frozen=True, slots=True)
class InventoryState:
    """
    Parameters
    ----------
    on_hand : int
        Units in the store.
    on_order : int
        Units ordered yesterday, arriving tomorrow morning.
    """

    on_hand: int
    on_order: int

    @property
    def inventory_position(self) -> int:
        return self.on_hand + self.on_order


class SimpleInventoryMRPFinite(FiniteMarkovRewardProcess[InventoryState]):
    """
    Inventory process under the "order up to capacity" policy.

    Parameters
    ----------
    capacity : int
        Maximum inventory position.
    poisson_lambda : float
        Mean daily demand.
    holding_cost : float
        Cost per unit on hand overnight.
    stockout_cost : float
        Cost per unit of demand that could not be met.

    Raises
    ------
    ValueError
        If ``capacity`` is negative, ``poisson_lambda`` is not positive or a
        cost is negative.
    """

    def __init__(
        self,
        capacity: int,
        poisson_lambda: float,
        holding_cost: float,
        stockout_cost: float,
    ) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        if poisson_lambda <= 0:
            raise ValueError(f"poisson_lambda must be positive, got {poisson_lambda}")
        if holding_cost < 0 or stockout_cost < 0:
            raise ValueError("Costs must be non-negative.")

        self.capacity = capacity
        self.poisson_lambda = poisson_lambda
        self.holding_cost = holding_cost
        self.stockout_cost = stockout_cost
        super().__init__(self._build_transition_reward_map())

    def _build_transition_reward_map(
        self,
    ) -> dict[InventoryState, Categorical[tuple[InventoryState, float]]]:
        demand = poisson(self.poisson_lambda)
        result: dict[InventoryState, Categorical[tuple[InventoryState, float]]] = {}

        for alpha in range(self.capacity + 1):
            for beta in range(self.capacity + 1 - alpha):
                state = InventoryState(alpha, beta)
                ip = state.inventory_position
                beta1 = self.capacity - ip
                base_reward = -self.holding_cost * alpha

                # demand fully met
                outcomes: dict[tuple[InventoryState, float], float] = {
                    (InventoryState(ip - i, beta1), base_reward): float(demand.pmf(i))
                    for i in range(ip)
                }

                # demand >= ip: shelf empties, reward carries the expected
                # shortfall conditional on that event
                p_empty = float(demand.sf(ip - 1))
                if p_empty > 0.0:
                    shortfall = p_empty * (self.poisson_lambda - ip) + ip * float(demand.pmf(ip))
                    reward = base_reward - self.stockout_cost * shortfall / p_empty
                    outcomes[(InventoryState(0, beta1), reward)] = p_empty

                result[state] = Categorical(outcomes)

        return result


def configure_simple_inventory() -> None:
    """
    Register the simple inventory process.
    """
    if ProcessRegister.contains(SIMPLE_INVENTORY):
        return

    ProcessRegister.register(
        ProcessSpec(
            name=SIMPLE_INVENTORY,
            factory=SimpleInventoryMRPFinite,
            description="Single-store inventory with Poisson demand (finite MRP).",
        )
    )


__all__ = [
    "SIMPLE_INVENTORY",
    "InventoryState",
    "SimpleInventoryMRPFinite",
    "configure_simple_inventory",
]
