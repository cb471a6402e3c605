# src/nameprice/config/currencies.py
"""
Currency Format Table - Static Per-Currency Constants

Decimal exponents, display precision and underflow/overflow thresholds for
every supported currency. The table is read-only and loaded once at import.

ETH and WETH cap at 9,999,999.999 rather than the 99,999,999.99 used by the
dollar-like currencies. 9999999900000000000000000 wei (9,999,999.9 ETH) must
still render in full while 10**25 wei (10,000,000 ETH) overflows, so the
ceiling sits just under ten million with the three display decimals.

Files that USE this module:
- nameprice.application.price_service (decimals for number conversion)
- nameprice.adapters.formatting.formatter (display rules)
- tests.* (expected sentinels and thresholds)

Files that this module USES:
- nameprice.domain.models (Currency, CurrencyFormat)
"""

from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from nameprice.domain.models import Currency, CurrencyFormat

PRICE_CURRENCY_FORMAT: Mapping[Currency, CurrencyFormat] = MappingProxyType({
    Currency.GAS: CurrencyFormat(
        decimals=0,
        display_decimals=0,
        min_display_value=0,
        max_display_value=Decimal("350000"),
        overflow_display_price=">350,000",
        underflow_display_price="<1",
        symbol="GAS",
        acronym="GAS",
    ),
    Currency.USD: CurrencyFormat(
        decimals=2,
        display_decimals=2,
        min_display_value=0,
        max_display_value=Decimal("99999999.99"),
        overflow_display_price=">99,999,999.99",
        underflow_display_price="<0.01",
        symbol="$",
        acronym="USD",
    ),
    Currency.ETH: CurrencyFormat(
        decimals=18,
        display_decimals=3,
        min_display_value=100_000_000_000_000,  # 0.0001 ETH
        max_display_value=Decimal("9999999.999"),  # 10**25 wei is the first overflow
        overflow_display_price=">9,999,999.999",
        underflow_display_price="<0.001",
        symbol="Ξ",
        acronym="ETH",
    ),
    Currency.WETH: CurrencyFormat(
        decimals=18,
        display_decimals=3,
        min_display_value=100_000_000_000_000,  # 0.0001 WETH
        max_display_value=Decimal("9999999.999"),
        overflow_display_price=">9,999,999.999",
        underflow_display_price="<0.001",
        symbol="WETH",
        acronym="WETH",
    ),
    Currency.DAI: CurrencyFormat(
        decimals=18,
        display_decimals=2,
        min_display_value=100_000_000_000_000,  # 0.0001 DAI
        max_display_value=Decimal("99999999.99"),
        overflow_display_price=">99,999,999.99",
        underflow_display_price="<0.01",
        symbol="DAI",
        acronym="DAI",
    ),
    Currency.USDC: CurrencyFormat(
        decimals=6,
        display_decimals=2,
        min_display_value=100,  # 0.0001 USDC
        max_display_value=Decimal("99999999.99"),
        overflow_display_price=">99,999,999.99",
        underflow_display_price="<0.01",
        symbol="USDC",
        acronym="USDC",
    ),
})


def currency_format(currency: Currency) -> CurrencyFormat:
    """Look up the display and precision constants of a currency."""
    return PRICE_CURRENCY_FORMAT[currency]
