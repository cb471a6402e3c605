# src/nameprice/application/conversion_service.py
"""
Conversion Service - Currency Conversion Through USD Rates

This module converts prices between currencies using a snapshot of
USD-per-unit exchange rates. The snapshot is always supplied by the caller
(directly or through a RatesSource); nothing here fetches or caches rates.

Files that USE this module:
- tests.test_conversion_service (unit tests)

Files that this module USES:
- nameprice.application.price_service (price_as_number, number_as_price)
- nameprice.domain.errors (PriceOverflowError)
- nameprice.domain.models (Price, Currency, ExchangeRates)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Debug traces of applied rates
import math  # Finite check on the exchanged amount
from typing import Any, Mapping, Protocol, Union  # Type hints for mappings and protocols

from nameprice.application.price_service import number_as_price, price_as_number
from nameprice.domain.errors import PriceOverflowError
from nameprice.domain.models import Currency, ExchangeRates, Price

log = logging.getLogger(__name__)


class RatesSource(Protocol):
    """Protocol for anything that can hand out the current rates snapshot."""
    def exchange_rates(self) -> ExchangeRates:
        ...


def convert_currency_with_rates(
    from_price: Price,
    to_currency: Currency,
    exchange_rates: Union[ExchangeRates, Mapping[str, Any]],
) -> Price:
    """
    Convert a price to another currency.

    rate = usd_rate(from) / usd_rate(to); the price is turned into a float,
    multiplied by the rate and converted back into the target currency's
    smallest unit.

    Args:
        from_price: Price to convert
        to_currency: Target currency
        exchange_rates: ExchangeRates snapshot, or a raw payload such as
                        {"ETH": 2277.56, "USD": 1, "savedAt": "..."}

    Returns:
        Price in to_currency

    Raises:
        InvalidRateError: If either rate is missing, non-finite, zero or negative
        PriceOverflowError: If the price or the converted amount exceeds the float range
    """
    if not isinstance(exchange_rates, ExchangeRates):
        exchange_rates = ExchangeRates.from_mapping(exchange_rates)

    rate = exchange_rates.rate_for(from_price.currency) / exchange_rates.rate_for(to_currency)
    exchanged_value = price_as_number(from_price) * rate
    if not math.isfinite(exchanged_value):
        raise PriceOverflowError(
            f"Converting {from_price.value} {from_price.currency} to {to_currency} "
            f"at rate {rate!r} is out of range"
        )
    result = number_as_price(exchanged_value, to_currency)

    log.debug(
        "Converted %s %s to %s %s at rate %s (rates saved at %s)",
        from_price.value, from_price.currency, result.value, to_currency,
        rate, exchange_rates.saved_at,
    )
    return result


class ConversionService:
    """
    Converts prices using rates pulled from a RatesSource on every call.
    """
    def __init__(self, source: RatesSource):
        """
        Initialize conversion service with a rates source.

        Args:
            source: Object providing exchange_rates() snapshots
        """
        self.source = source

    def convert(self, price: Price, to_currency: Currency) -> Price:
        """Convert a price with the source's current snapshot."""
        return convert_currency_with_rates(price, to_currency, self.source.exchange_rates())

    def convert_all(self, prices, to_currency: Currency) -> list[Price]:
        """
        Convert several prices against one snapshot.

        The source is asked once so that every price uses the same rates.
        """
        rates = self.source.exchange_rates()
        return [convert_currency_with_rates(price, to_currency, rates) for price in prices]
