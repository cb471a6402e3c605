# src/nameprice/domain/errors.py
"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions that represent
business rule violations in price arithmetic and conversion.
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class PriceError(DomainError):
    """Base exception for errors raised by price operations."""
    pass


class CurrencyMismatchError(PriceError):
    """Raised when prices of different currencies are combined."""

    def __init__(self, message: str, currencies=()):
        super().__init__(message)
        self.currencies = tuple(currencies)


class InvalidRateError(PriceError):
    """Raised when an exchange rate is missing, non-finite, zero or negative."""
    pass


class InvalidScaleFactorError(PriceError, ValueError):
    """Raised when a scale factor is negative or not a finite number."""
    pass


class UnknownCurrencyError(PriceError, ValueError):
    """Raised when a currency code is not one of the supported currencies."""
    pass


class PriceOverflowError(PriceError, ValueError):
    """Raised when a price is too large to cross the float boundary."""
    pass
