# src/nameprice/adapters/formatting/formatter.py
"""
Price Formatter - Text Formatting and Presentation

This module renders prices for display: thousands-grouped decimals with a
fixed number of fractional digits per currency, underflow and overflow
sentinels, and optional symbol/acronym decoration. Rendering is done with
decimal.Decimal so that 18-decimal token amounts are never squeezed through
a float on their way to the screen.

Files that USE this module:
- tests.test_formatter (unit tests)

Files that this module USES:
- nameprice.config.currencies (per-currency display constants)
- nameprice.domain.models (Price, Currency, ExchangeRates, CurrencyFormat)
- nameprice.shared.validators (validate_rate)
"""
from __future__ import annotations

from decimal import MAX_EMAX, MIN_EMIN, ROUND_HALF_UP, Context, Decimal

from nameprice.config.currencies import currency_format
from nameprice.domain.models import Currency, CurrencyFormat, ExchangeRates, Price
from nameprice.shared.validators import validate_rate


def _display_context(value: int, fmt: CurrencyFormat) -> Context:
    # Enough digits for the whole integer plus the fractional display digits
    digits = int(abs(value).bit_length() * 0.30103) + 2
    return Context(
        prec=max(28, digits + fmt.display_decimals),
        rounding=ROUND_HALF_UP,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
    )


def display_value(price: Price) -> Decimal:
    """
    Price value in whole units, rounded half-up to the currency's display decimals.

    Args:
        price: Price to scale

    Returns:
        Exact Decimal, e.g. Decimal("0.054") for 54000000000000000 wei
    """
    fmt = currency_format(price.currency)
    ctx = _display_context(price.value, fmt)
    whole_units = Decimal(price.value).scaleb(-fmt.decimals, context=ctx)
    return whole_units.quantize(Decimal(1).scaleb(-fmt.display_decimals), context=ctx)


def _zero_amount(display_decimals: int) -> str:
    if display_decimals == 0:
        return "0"
    return "0." + "0" * display_decimals


def formatted_price(price: Price, with_prefix: bool = False, with_suffix: bool = False) -> str:
    """
    Format a price for display.

    Rules, in order:
    - Non-zero values that would display as zero, or non-zero values at or
      below the currency's min_display_value, show the underflow sentinel.
      Negative amounts fall under the second case and never show a minus sign.
    - Zero shows as zero with the currency's display decimals ("0.00").
    - Anything else is grouped with commas and padded to the display decimals.
    - Values above max_display_value are replaced by the overflow sentinel.

    Args:
        price: Price to format
        with_prefix: Prepend the currency symbol (e.g. "$1,500.00")
        with_suffix: Append the currency acronym (e.g. "1,500.00 USD")

    Returns:
        Display string. Never raises for any integer value.
    """
    fmt = currency_format(price.currency)
    value = display_value(price)

    would_display_as_zero = value == 0
    is_below_currency_minimum = price.value <= fmt.min_display_value

    if price.value != 0 and (would_display_as_zero or is_below_currency_minimum):
        formatted_amount = fmt.underflow_display_price
    elif price.value == 0:
        formatted_amount = _zero_amount(fmt.display_decimals)
    else:
        formatted_amount = f"{value:,.{fmt.display_decimals}f}"

    if value > fmt.max_display_value:
        formatted_amount = fmt.overflow_display_price

    prefix_unit = fmt.symbol if with_prefix else ""
    suffix_unit = fmt.acronym if with_suffix else ""

    # Skip the symbol when it would just repeat the acronym ("DAI 1.00 DAI")
    if prefix_unit and prefix_unit != suffix_unit:
        price_display = prefix_unit + formatted_amount
    else:
        price_display = formatted_amount
    if suffix_unit:
        price_display += f" {suffix_unit}"
    return price_display


def _usd_price_from_rate(rate: float) -> Price:
    # Exact decimal expansion of the float, so huge rates stay integers
    fmt = currency_format(Currency.USD)
    whole_units = Decimal(rate)
    ctx = Context(
        prec=max(28, whole_units.adjusted() + fmt.decimals + 2),
        rounding=ROUND_HALF_UP,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
    )
    cents = whole_units.scaleb(fmt.decimals, context=ctx).to_integral_value(context=ctx)
    return Price(value=int(cents), currency=Currency.USD)


def format_exchange_rates(rates: ExchangeRates) -> str:
    """
    Format an exchange rate snapshot as one line per currency.

    Args:
        rates: Snapshot to format

    Returns:
        Multi-line string like "1 ETH = $2,277.57", with "N/A" for
        currencies whose rate is missing or invalid. Rates too large for
        the USD display range show the overflow sentinel.
    """
    lines = []
    for currency in Currency:
        rate = rates.rates.get(currency)
        if rate is None or not validate_rate(rate):
            lines.append(f"1 {currency.value} = N/A")
            continue
        usd_price = _usd_price_from_rate(rate)
        lines.append(f"1 {currency.value} = {formatted_price(usd_price, with_prefix=True)}")

    if rates.saved_at is not None:
        lines.append(f"Rates saved at {rates.saved_at}")
    return "\n".join(lines)
