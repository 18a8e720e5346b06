"""
Built-in example processes from finance and operations.
"""

__author__ = "rlmdp-core developers"
__copyright__ = "Copyright (c) 2026 rlmdp-core project"
__license__ = "SPDX-License-Identifier: MIT"

from .inventory import (
    SIMPLE_INVENTORY,
    InventoryState,
    SimpleInventoryMRPFinite,
    configure_simple_inventory,
)
from .stock_price import (
    STOCK_PRICE_MEAN_REVERSION,
    StockPriceMeanReversion,
    configure_stock_price_mean_reversion,
)

__all__ = [
    "SIMPLE_INVENTORY",
    "STOCK_PRICE_MEAN_REVERSION",
    "InventoryState",
    "SimpleInventoryMRPFinite",
    "StockPriceMeanReversion",
    "configure_simple_inventory",
    "configure_stock_price_mean_reversion",
]
