# src/nameprice/application/premium_service.py
"""
Premium Service - Temporary Premium on Released Domains

When a domain expires and its grace period ends, it is released to the
market with a temporary premium that discourages instant re-registration.
The premium starts at $100,000,000.00 and halves every day. After
FINAL_PREMIUM_DAYS the decayed value equals PREMIUM_OFFSET, which is
subtracted from every sample so that the premium lands exactly on zero at
the end of the window instead of trailing off forever.

premium(t) = START * 0.5 ** (t / 1 day) - START * 0.5 ** 21, floored at 0

Both exponential terms are applied to START with the fixed-point scaler so
the integer cents never pass through a float.

Files that USE this module:
- tests.test_premium_service (unit tests)

Files that this module USES:
- nameprice.application.price_service (approx_scale_price, subtract_prices)
- nameprice.domain.models (Price, Currency)
- nameprice.shared.time (ONE_DAY_IN_SECONDS, GRACE_PERIOD)
"""
from __future__ import annotations

import logging

from nameprice.application.price_service import approx_scale_price, subtract_prices
from nameprice.domain.models import Currency, Price
from nameprice.shared.time import GRACE_PERIOD, ONE_DAY_IN_SECONDS

log = logging.getLogger(__name__)

# Pinned rather than read from settings: the curve is calibrated at this precision
PREMIUM_DIGITS_OF_PRECISION = 20

PREMIUM_DECAY_RATE = 0.5
FINAL_PREMIUM_DAYS = 21
PREMIUM_START_PRICE = Price(value=10_000_000_000, currency=Currency.USD)  # $100,000,000.00
PREMIUM_OFFSET = approx_scale_price(
    PREMIUM_START_PRICE,
    PREMIUM_DECAY_RATE ** FINAL_PREMIUM_DAYS,
    PREMIUM_DIGITS_OF_PRECISION,
)
PREMIUM_DURATION = FINAL_PREMIUM_DAYS * ONE_DAY_IN_SECONDS

_ZERO_PREMIUM = Price(value=0, currency=Currency.USD)


def premium_at(now: int, release_timestamp: int) -> Price:
    """
    Premium of a released domain at a given instant.

    Args:
        now: Unix timestamp (seconds) to evaluate the premium at
        release_timestamp: Unix timestamp when the domain was released
                           (expiration plus grace period)

    Returns:
        USD price in cents. Before release the full starting premium
        (START - OFFSET) applies; from FINAL_PREMIUM_DAYS on it is zero.
    """
    seconds_since_release = max(now - release_timestamp, 0)
    if seconds_since_release >= PREMIUM_DURATION:
        return _ZERO_PREMIUM

    fractional_days = seconds_since_release / ONE_DAY_IN_SECONDS
    decay_factor = PREMIUM_DECAY_RATE ** fractional_days
    decayed_price = approx_scale_price(PREMIUM_START_PRICE, decay_factor, PREMIUM_DIGITS_OF_PRECISION)
    premium = subtract_prices(decayed_price, PREMIUM_OFFSET)

    log.debug(
        "Premium %.4f days after release: decay factor %r, %s cents",
        fractional_days, decay_factor, premium.value,
    )
    if premium.value <= 0:
        return _ZERO_PREMIUM
    return premium


def temporary_premium_price_at_timestamp(
    at_timestamp: int,
    expiration_timestamp: int,
    grace_period: int = GRACE_PERIOD,
) -> Price:
    """
    Premium of a domain at a given instant, starting from its expiration.

    Args:
        at_timestamp: Unix timestamp (seconds) to evaluate the premium at
        expiration_timestamp: Unix timestamp when the registration expired
        grace_period: Seconds between expiration and release (default: 90 days)

    Returns:
        USD price in cents
    """
    return premium_at(at_timestamp, expiration_timestamp + grace_period)


def premium_end_timestamp(expiration_timestamp: int, grace_period: int = GRACE_PERIOD) -> int:
    """Unix timestamp from which a domain expired at expiration_timestamp carries no premium."""
    return expiration_timestamp + grace_period + PREMIUM_DURATION
