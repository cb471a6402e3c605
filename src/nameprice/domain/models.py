# src/nameprice/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core pricing concepts:
- Supported currencies
- Prices (integer amounts in a currency's smallest unit)
- Per-currency display formats
- Exchange rate snapshots

Files that USE this module:
- nameprice.config.currencies (builds the CurrencyFormat table)
- nameprice.application.* (all services operate on Price and ExchangeRates)
- nameprice.adapters.formatting.formatter (renders Price values)
- tests.* (tests use domain models for test data)

Files that this module USES:
- nameprice.domain.errors (InvalidRateError, UnknownCurrencyError)
- nameprice.shared.validators (validate_rate for exchange rate checks)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging rejected rates
from dataclasses import dataclass  # Decorator for creating data classes
from datetime import datetime  # Date/time type for snapshot timestamps
from decimal import Decimal  # Exact decimal type for display thresholds
from enum import Enum  # Base class for the closed currency set
from types import MappingProxyType  # Read-only view over the rates dictionary
from typing import Any, Mapping, Optional, Union  # Type hints

from nameprice.domain.errors import InvalidRateError, UnknownCurrencyError
from nameprice.shared.validators import validate_rate

log = logging.getLogger(__name__)


class Currency(str, Enum):
    """Currencies supported by the marketplace. Values are the acronyms."""

    GAS = "GAS"
    USD = "USD"
    ETH = "ETH"
    WETH = "WETH"
    DAI = "DAI"
    USDC = "USDC"

    @classmethod
    def from_str(cls, code: str) -> "Currency":
        """
        Resolve a currency from its acronym (case-insensitive).

        Raises:
            UnknownCurrencyError: If the code is not a supported currency
        """
        if not isinstance(code, str):
            raise UnknownCurrencyError(f"Currency code must be a string, got: {code!r}")
        try:
            return cls(code.strip().upper())
        except ValueError as e:
            available = ", ".join(c.value for c in cls)
            raise UnknownCurrencyError(
                f"Unknown currency '{code}'. Available currencies: {available}"
            ) from e

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Price:
    """
    An amount of money in a currency's smallest unit.

    Attributes:
        value: Integer magnitude (cents for USD, wei-like units for ETH/WETH/DAI)
        currency: Currency the magnitude is expressed in
    """
    value: int
    currency: Currency

    def __post_init__(self) -> None:
        # bool is an int subclass but never a meaningful magnitude
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(
                f"Price value must be an int in the currency's smallest unit, got: {self.value!r}"
            )


@dataclass(frozen=True)
class CurrencyFormat:
    """
    Display and precision constants for a single currency.

    Attributes:
        decimals: Exponent of the smallest unit (value / 10**decimals = whole units)
        display_decimals: Number of fractional digits shown to users
        min_display_value: Smallest-unit floor; non-zero values at or below it (all negatives included) show as underflow
        max_display_value: Largest display-scaled value shown before switching to overflow
        overflow_display_price: Text shown for values above max_display_value
        underflow_display_price: Text shown for non-zero values too small to display
        symbol: Prefix symbol (e.g. "$")
        acronym: Suffix acronym (e.g. "USD")
    """
    decimals: int
    display_decimals: int
    min_display_value: int
    max_display_value: Decimal
    overflow_display_price: str
    underflow_display_price: str
    symbol: str
    acronym: str

    def __post_init__(self) -> None:
        if self.display_decimals > self.decimals:
            raise ValueError(
                f"display_decimals ({self.display_decimals}) cannot exceed decimals ({self.decimals})"
            )


@dataclass(frozen=True)
class ExchangeRates:
    """
    Snapshot of USD-per-unit exchange rates for every currency.

    Example rates: {ETH: 1737.16, DAI: 0.99999703, USDC: 1, WETH: 1737.16, USD: 1, GAS: 1}

    Attributes:
        rates: Mapping of currency to its USD rate
        saved_at: When the snapshot was captured (kept as supplied)
    """
    rates: Mapping[Currency, float]
    saved_at: Optional[Union[str, datetime]] = None

    def __post_init__(self) -> None:
        normalized = {
            key if isinstance(key, Currency) else Currency.from_str(key): value
            for key, value in self.rates.items()
        }
        object.__setattr__(self, "rates", MappingProxyType(normalized))

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "ExchangeRates":
        """
        Build a snapshot from the rate service payload.

        Keys are currency acronyms plus an optional "savedAt" timestamp,
        e.g. {"ETH": 2277.56, "USD": 1, "savedAt": "2024-01-04T19:04:15.194Z"}.
        Unknown keys are ignored.

        Raises:
            InvalidRateError: If a known currency maps to a non-numeric value
        """
        known = {c.value for c in Currency}
        rates = {}
        for key, value in payload.items():
            code = str(key).upper()
            if code not in known:
                continue
            try:
                rates[Currency(code)] = float(value)
            except (TypeError, ValueError) as e:
                raise InvalidRateError(f"Rate for {code} is not a number: {value!r}") from e
        saved_at = payload.get("savedAt", payload.get("saved_at"))
        return cls(rates=rates, saved_at=saved_at)

    def rate_for(self, currency: Currency) -> float:
        """
        Get the USD rate of a currency.

        Raises:
            InvalidRateError: If the rate is missing, non-finite, zero or negative
        """
        rate = self.rates.get(currency)
        if rate is None:
            log.warning("No exchange rate for %s in snapshot saved at %s", currency, self.saved_at)
            raise InvalidRateError(f"No exchange rate available for {currency}")
        if not validate_rate(rate):
            log.warning("Invalid exchange rate for %s: %r", currency, rate)
            raise InvalidRateError(f"Invalid exchange rate for {currency}: {rate!r}")
        return float(rate)
