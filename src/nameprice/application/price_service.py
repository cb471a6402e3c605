# src/nameprice/application/price_service.py
"""
Price Service - Arithmetic and Number Conversion for Prices

This module contains the integer arithmetic over prices (addition,
subtraction, scaling, multiplication by a number) and the two boundary
crossings between integer prices and floating-point numbers.

Integer arithmetic on Price.value is exact. The float boundary
(price_as_number / number_as_price) is lossy by nature and only used where
a float is unavoidable, e.g. when applying an exchange rate.

Files that USE this module:
- nameprice.application.conversion_service (number conversion)
- nameprice.application.premium_service (approx_scale_price, subtract_prices)
- tests.test_price_service (unit tests)

Files that this module USES:
- nameprice.config.currencies (decimals per currency)
- nameprice.domain.models (Price, Currency)
- nameprice.domain.errors (CurrencyMismatchError)
- nameprice.shared.number (approx_scale_int)
"""
from __future__ import annotations

import math
from typing import Optional, Sequence

from nameprice.config.currencies import currency_format
from nameprice.domain.errors import CurrencyMismatchError, PriceOverflowError
from nameprice.domain.models import Currency, Price
from nameprice.shared.number import approx_scale_int


def _div_toward_zero(numerator: int, denominator: int) -> int:
    # Python's // floors negative quotients
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


def price_as_number(price: Price) -> float:
    """
    Convert a price to a float in whole currency units.

    Lossy for magnitudes beyond float precision; use only for display-adjacent
    computation such as applying an exchange rate.

    Args:
        price: Price to convert

    Returns:
        price.value / 10**decimals as float

    Raises:
        PriceOverflowError: If the value in whole units exceeds the float range
    """
    try:
        return price.value / 10 ** currency_format(price.currency).decimals
    except OverflowError as e:
        raise PriceOverflowError(
            f"Price of {price.value} {price.currency} is too large to convert to a number"
        ) from e


def number_as_price(number: float, currency: Currency) -> Price:
    """
    Convert a float in whole currency units to a price.

    The number is first rounded to the currency's decimals to drop float
    representation noise (0.30000000000000004 -> 0.3), then shifted into the
    smallest unit and rounded to a whole unit. round() on a float returns an
    int directly, so large values never pass through a scientific-notation
    string on their way to the integer.

    Args:
        number: Amount in whole units (e.g. 15.5 for $15.50)
        currency: Currency of the resulting price

    Returns:
        Price in the currency's smallest unit

    Raises:
        ValueError: If number is NaN or infinite
        PriceOverflowError: If the number in smallest units exceeds the float range
    """
    if not math.isfinite(number):
        raise ValueError(f"Cannot convert non-finite number to a price: {number!r}")

    decimals = currency_format(currency).decimals
    number_with_currency_decimals = round(number, decimals)
    number_without_decimals = number_with_currency_decimals * 10 ** decimals
    if not math.isfinite(number_without_decimals):
        raise PriceOverflowError(
            f"Cannot convert {number!r} to {currency}: too large in smallest units"
        )
    return Price(value=round(number_without_decimals), currency=currency)


def add_prices(prices: Sequence[Price]) -> Price:
    """
    Add prices of the same currency.

    Args:
        prices: Non-empty sequence of prices

    Returns:
        Price with the summed value in the currency of the first price

    Raises:
        ValueError: If prices is empty
        CurrencyMismatchError: If any price has a different currency than the first
    """
    if not prices:
        raise ValueError("Cannot add an empty sequence of prices")

    currency = prices[0].currency
    if any(price.currency != currency for price in prices):
        currencies = [price.currency for price in prices]
        raise CurrencyMismatchError(
            f"Cannot add prices of different currencies: {', '.join(str(c) for c in currencies)}",
            currencies,
        )

    return Price(value=sum(price.value for price in prices), currency=currency)


def subtract_prices(price1: Price, price2: Price) -> Price:
    """
    Subtract price2 from price1. The result may be negative.

    Raises:
        CurrencyMismatchError: If the prices have different currencies
    """
    if price1.currency != price2.currency:
        raise CurrencyMismatchError(
            f"Cannot subtract price of currency {price2.currency} from price of currency {price1.currency}",
            (price1.currency, price2.currency),
        )
    return Price(value=price1.value - price2.value, currency=price1.currency)


def multiply_price_by_number(price: Price, number: float) -> Price:
    """
    Multiply a price by a float.

    The number is converted to the price currency's smallest unit first
    (so it keeps as many decimals as the currency has), then the product is
    computed in integers and truncated toward zero.

    Args:
        price: Price to multiply
        number: Multiplier (e.g. 1.5)

    Returns:
        Price in the same currency
    """
    decimals = currency_format(price.currency).decimals
    number_as_units = number_as_price(number, price.currency).value
    return Price(
        value=_div_toward_zero(price.value * number_as_units, 10 ** decimals),
        currency=price.currency,
    )


def approx_scale_price(
    price: Price,
    scale_factor: float,
    digits_of_precision: Optional[int] = None,
) -> Price:
    """
    Scale a price by a float factor using integer arithmetic.

    See nameprice.shared.number.approx_scale_int for precision rules.
    """
    return Price(
        value=approx_scale_int(price.value, scale_factor, digits_of_precision),
        currency=price.currency,
    )
