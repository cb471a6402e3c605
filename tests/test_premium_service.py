"""
Premium Service Tests - Unit Tests for Premium Decay

This module contains unit tests for the temporary premium charged on
released domains: calibrated sample points, boundaries before release and
after the decay window, and monotonic decay.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- nameprice.application.premium_service (functions and constants under test)
- nameprice.application.price_service (subtract_prices for expected values)
- nameprice.shared.time (GRACE_PERIOD, ONE_DAY_IN_SECONDS)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from nameprice.application.premium_service import (
    FINAL_PREMIUM_DAYS,
    PREMIUM_OFFSET,
    PREMIUM_START_PRICE,
    premium_at,
    premium_end_timestamp,
    temporary_premium_price_at_timestamp,
)
from nameprice.application.price_service import subtract_prices
from nameprice.domain.models import Currency, Price
from nameprice.shared.time import GRACE_PERIOD, ONE_DAY_IN_SECONDS

NOW = 1707054623  # 2024-02-04 13:50:23 UTC


class TestPremiumConstants:
    def test_start_price(self):
        assert PREMIUM_START_PRICE == Price(10_000_000_000, Currency.USD)

    def test_offset(self):
        # $100M halved 21 times, truncated to whole cents
        assert PREMIUM_OFFSET == Price(4768, Currency.USD)


class TestTemporaryPremiumPrice:
    @pytest.mark.parametrize("seconds_since_release, expected_cents", [
        (ONE_DAY_IN_SECONDS * 20, 4768),
        (ONE_DAY_IN_SECONDS * 41 // 2, 1975),
        (ONE_DAY_IN_SECONDS * 3 // 2, 3535529137),
        (1814340, 2),  # 20 days, 23 hours and 59 minutes
    ])
    def test_calibrated_samples(self, seconds_since_release, expected_cents):
        expiration = NOW - seconds_since_release - GRACE_PERIOD

        result = temporary_premium_price_at_timestamp(NOW, expiration)

        assert result == Price(expected_cents, Currency.USD)

    def test_just_released(self):
        result = temporary_premium_price_at_timestamp(NOW, NOW - GRACE_PERIOD)
        assert result == subtract_prices(PREMIUM_START_PRICE, PREMIUM_OFFSET)
        assert result.value == 9_999_995_232

    def test_custom_grace_period(self):
        result = temporary_premium_price_at_timestamp(NOW, NOW - 20 * ONE_DAY_IN_SECONDS, grace_period=0)
        assert result == Price(4768, Currency.USD)


class TestPremiumAt:
    def test_release_instant(self):
        assert premium_at(NOW, NOW) == subtract_prices(PREMIUM_START_PRICE, PREMIUM_OFFSET)

    def test_before_release_clamps_to_start(self):
        assert premium_at(NOW - 3 * ONE_DAY_IN_SECONDS, NOW) == premium_at(NOW, NOW)

    def test_zero_at_end_of_window(self):
        assert premium_at(NOW + FINAL_PREMIUM_DAYS * ONE_DAY_IN_SECONDS, NOW) == Price(0, Currency.USD)

    def test_zero_long_after_window(self):
        assert premium_at(NOW + 10 ** 12, NOW) == Price(0, Currency.USD)
        assert premium_at(10 ** 400, 0) == Price(0, Currency.USD)

    def test_always_usd(self):
        for days in (0, 1, 7, 20):
            assert premium_at(NOW + days * ONE_DAY_IN_SECONDS, NOW).currency == Currency.USD

    def test_halves_every_day(self):
        day_one = premium_at(NOW + ONE_DAY_IN_SECONDS, NOW).value + PREMIUM_OFFSET.value
        day_two = premium_at(NOW + 2 * ONE_DAY_IN_SECONDS, NOW).value + PREMIUM_OFFSET.value
        assert day_one == 5_000_000_000
        assert day_two == 2_500_000_000

    def test_monotonically_non_increasing(self):
        previous = premium_at(NOW, NOW).value
        for elapsed in range(0, FINAL_PREMIUM_DAYS * ONE_DAY_IN_SECONDS + 1, 3600):
            current = premium_at(NOW + elapsed, NOW).value
            assert 0 <= current <= previous
            previous = current

    def test_positive_inside_window(self):
        assert premium_at(NOW + 1814340, NOW).value > 0


class TestPremiumEndTimestamp:
    def test_end_timestamp(self):
        expiration = NOW
        end = premium_end_timestamp(expiration)
        assert end == NOW + GRACE_PERIOD + 21 * ONE_DAY_IN_SECONDS
        assert temporary_premium_price_at_timestamp(end, expiration).value == 0
