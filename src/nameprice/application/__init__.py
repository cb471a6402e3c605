"""
Application Layer - Use Cases and Services

This package contains application services that orchestrate domain logic:
price arithmetic, currency conversion and premium pricing.
No I/O - exchange rates are always supplied by the caller.
"""

from nameprice.application.price_service import (
    add_prices,
    approx_scale_price,
    multiply_price_by_number,
    number_as_price,
    price_as_number,
    subtract_prices,
)
from nameprice.application.conversion_service import (
    ConversionService,
    RatesSource,
    convert_currency_with_rates,
)
from nameprice.application.premium_service import (
    PREMIUM_OFFSET,
    PREMIUM_START_PRICE,
    premium_at,
    premium_end_timestamp,
    temporary_premium_price_at_timestamp,
)

__all__ = [
    "add_prices",
    "subtract_prices",
    "multiply_price_by_number",
    "approx_scale_price",
    "price_as_number",
    "number_as_price",
    "convert_currency_with_rates",
    "ConversionService",
    "RatesSource",
    "PREMIUM_START_PRICE",
    "PREMIUM_OFFSET",
    "premium_at",
    "temporary_premium_price_at_timestamp",
    "premium_end_timestamp",
]
