# src/nameprice/shared/number.py
"""
Fixed-Point Scaler - Integer Scaling by Approximate Factors

This module multiplies arbitrarily large integer amounts by floating-point
factors without ever holding the full product in a float. A float only has
53 bits of mantissa, so amounts such as 10**25 wei cannot be multiplied in
floating point without losing their low digits. Instead the factor is turned
into an integer fraction carrying a fixed number of significant decimal
digits, and the multiplication and division happen in integer arithmetic.

Files that USE this module:
- nameprice.application.price_service (approx_scale_price)
- nameprice.application.premium_service (premium decay scaling)
- tests.test_number (unit tests)

Files that this module USES:
- nameprice.config.settings (default digits of precision)
- nameprice.domain.errors (InvalidScaleFactorError)
- nameprice.shared.validators (validate_scale_factor)
"""
from __future__ import annotations

from typing import Optional, Tuple

from nameprice.config.settings import settings
from nameprice.domain.errors import InvalidScaleFactorError
from nameprice.shared.validators import validate_scale_factor


def factor_as_fraction(scale_factor: float, digits_of_precision: int) -> Tuple[int, int]:
    """
    Approximate a float as an integer numerator over a power-of-ten denominator.

    The numerator carries `digits_of_precision` significant digits of the
    float's exact decimal expansion, e.g. 0.5 ** 21 with 20 digits becomes
    47683715820312500000 / 10**26.

    Args:
        scale_factor: Finite, non-negative factor
        digits_of_precision: Number of significant decimal digits to keep

    Returns:
        Tuple of (numerator, denominator)
    """
    mantissa, exponent = f"{float(scale_factor):.{digits_of_precision - 1}e}".split("e")
    numerator = int(mantissa.replace(".", ""))
    shift = int(exponent) - (digits_of_precision - 1)
    if shift >= 0:
        return numerator * 10 ** shift, 1
    return numerator, 10 ** -shift


def approx_scale_int(
    value: int,
    scale_factor: float,
    digits_of_precision: Optional[int] = None,
) -> int:
    """
    Approximate `value * scale_factor` using integer arithmetic only.

    The result is truncated toward zero, so negative values scale
    symmetrically with positive ones.

    Args:
        value: Integer amount to scale (any size)
        scale_factor: Finite, non-negative factor
        digits_of_precision: Significant digits kept from the factor
                             (defaults to settings.scale_digits_of_precision)

    Returns:
        Scaled integer amount

    Raises:
        InvalidScaleFactorError: If scale_factor is negative, NaN or infinite
        ValueError: If digits_of_precision is less than 1
    """
    if digits_of_precision is None:
        digits_of_precision = settings.scale_digits_of_precision
    if digits_of_precision < 1:
        raise ValueError(f"digits_of_precision must be at least 1, got: {digits_of_precision}")
    if not validate_scale_factor(scale_factor):
        raise InvalidScaleFactorError(
            f"Scale factor must be a finite non-negative number, got: {scale_factor!r}"
        )

    if scale_factor == 0 or value == 0:
        return 0

    numerator, denominator = factor_as_fraction(scale_factor, digits_of_precision)
    scaled = abs(value) * numerator // denominator
    return scaled if value > 0 else -scaled
