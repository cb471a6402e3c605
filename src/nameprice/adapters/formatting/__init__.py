"""
Formatting Adapters - Price Formatting

This package contains the display formatting for prices and rate snapshots.
"""

from nameprice.adapters.formatting.formatter import (
    display_value,
    format_exchange_rates,
    formatted_price,
)

__all__ = [
    "display_value",
    "formatted_price",
    "format_exchange_rates",
]
