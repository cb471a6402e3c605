"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from nameprice.domain.models import (
    Currency,
    CurrencyFormat,
    ExchangeRates,
    Price,
)
from nameprice.domain.errors import (
    CurrencyMismatchError,
    DomainError,
    InvalidRateError,
    InvalidScaleFactorError,
    PriceError,
    PriceOverflowError,
    UnknownCurrencyError,
)

__all__ = [
    "Currency",
    "CurrencyFormat",
    "ExchangeRates",
    "Price",
    "DomainError",
    "PriceError",
    "CurrencyMismatchError",
    "InvalidRateError",
    "InvalidScaleFactorError",
    "PriceOverflowError",
    "UnknownCurrencyError",
]
