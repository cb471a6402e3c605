"""
Input Validation Utilities - Numeric Data Validation

This module provides validation predicates for the numbers that cross into
the price model from callers: exchange rates and scale factors. Each
predicate returns a boolean; the caller decides which domain error to raise.

Files that USE this module:
- nameprice.domain.models (ExchangeRates.rate_for validates rates)
- nameprice.shared.number (approx_scale_int validates scale factors)

Files that this module USES:
- None (pure utility functions)
"""
import math
from numbers import Real


def _is_real(value) -> bool:
    # bool is a Real subclass but never a meaningful rate or factor
    return isinstance(value, Real) and not isinstance(value, bool)


def validate_rate(value) -> bool:
    """
    Validate an exchange rate.

    Args:
        value: Rate in USD per whole unit of a currency

    Returns:
        True if the rate is a finite number greater than zero, False otherwise
    """
    if not _is_real(value):
        return False
    return math.isfinite(value) and value > 0


def validate_scale_factor(value) -> bool:
    """
    Validate a scale factor for fixed-point scaling.

    Args:
        value: Factor to multiply an integer amount by

    Returns:
        True if the factor is a finite number greater than or equal to zero
    """
    if not _is_real(value):
        return False
    return math.isfinite(value) and value >= 0
