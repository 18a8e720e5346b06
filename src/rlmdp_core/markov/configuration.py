"""
Built-in Processes Configuration
================================

This module registers the built-in example processes in the global
:class:`ProcessRegister`:

- ``"SimpleInventory"`` — single-store inventory with Poisson demand.
- ``"StockPriceMeanReversion"`` — integer price random walk with reversion.

Notes
-----
- Configuration is applied once per process via LRU caching.
- Each builtin configurator is idempotent.
"""

from __future__ import annotations

__author__ = "rlmdp-core developers"
__copyright__ = "Copyright (c) 2026 rlmdp-core project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from rlmdp_core.markov.builtins import (
    configure_simple_inventory,
    configure_stock_price_mean_reversion,
)
from rlmdp_core.markov.registry import ProcessRegister


@lru_cache(maxsize=1)
def configure_process_register() -> ProcessRegister:
    """
    Register all built-in processes in the global registry.

    Returns
    -------
    ProcessRegister
        The global registry of named processes.
    """
    configure_simple_inventory()
    configure_stock_price_mean_reversion()
    return ProcessRegister()


def reset_process_register() -> None:
    """
    Reset the cached process registry.
    """
    configure_process_register.cache_clear()
    ProcessRegister._reset()


__all__ = ["configure_process_register", "reset_process_register"]
