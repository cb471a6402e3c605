"""
Conversion Service Tests - Unit Tests for Currency Conversion

This module contains unit tests for converting prices between currencies
with caller-supplied exchange rate snapshots, including rate validation and
the ConversionService wrapper around a rates source.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- nameprice.application.conversion_service (functions and classes under test)
- nameprice.application.price_service (round-trip reference)
- nameprice.domain.models (Price, Currency, ExchangeRates)
- unittest.mock (Mock rates source)
- pytest (testing framework)
"""
import math

import pytest  # Testing framework for writing and running tests

from unittest.mock import Mock  # Mock rates source

from nameprice.application.conversion_service import ConversionService, convert_currency_with_rates
from nameprice.application.price_service import number_as_price, price_as_number
from nameprice.domain.errors import InvalidRateError, PriceOverflowError
from nameprice.domain.models import Currency, ExchangeRates, Price

# Snapshot taken on 2024-01-04; values only need to be realistic
RATES_PAYLOAD = {
    "ETH": 2277.56570676,
    "DAI": 1.0000538,
    "USDC": 0.99996938,
    "WETH": 2277.56570676,
    "USD": 1,
    "GAS": 1,
    "savedAt": "2024-01-04T19:04:15.194Z",
}


@pytest.fixture
def rates():
    return ExchangeRates.from_mapping(RATES_PAYLOAD)


class TestConvertCurrencyWithRates:
    @pytest.mark.parametrize("price", [
        Price(0, Currency.USD),
        Price(150000, Currency.USD),
        Price(54000000000000000, Currency.ETH),
        Price(1500000000000000000000, Currency.DAI),
        Price(150000000, Currency.USDC),
        Price(350000, Currency.GAS),
    ])
    def test_same_currency_matches_round_trip(self, price, rates):
        result = convert_currency_with_rates(price, price.currency, rates)
        expected = number_as_price(price_as_number(price), price.currency)
        assert result.currency == price.currency
        assert abs(result.value - expected.value) <= 1
        assert abs(result.value - price.value) <= 1

    def test_equal_rates_between_currencies(self):
        snapshot = ExchangeRates({Currency.DAI: 1.0, Currency.USDC: 1.0})
        result = convert_currency_with_rates(Price(1500 * 10 ** 18, Currency.DAI), Currency.USDC, snapshot)
        assert result == Price(1500000000, Currency.USDC)

    def test_eth_to_usd(self, rates):
        result = convert_currency_with_rates(Price(10 ** 18, Currency.ETH), Currency.USD, rates)
        assert result == Price(227757, Currency.USD)

    def test_usd_to_eth(self, rates):
        result = convert_currency_with_rates(Price(227757, Currency.USD), Currency.ETH, rates)
        assert result.currency == Currency.ETH
        assert result.value == pytest.approx(10 ** 18 * 2277.57 / 2277.56570676, rel=1e-9)

    def test_accepts_raw_payload(self):
        result = convert_currency_with_rates(Price(10 ** 18, Currency.WETH), Currency.USD, RATES_PAYLOAD)
        assert result == Price(227757, Currency.USD)

    def test_missing_target_rate(self):
        snapshot = ExchangeRates({Currency.ETH: 2000.0})
        with pytest.raises(InvalidRateError, match="USD"):
            convert_currency_with_rates(Price(1, Currency.ETH), Currency.USD, snapshot)

    def test_missing_source_rate(self):
        snapshot = ExchangeRates({Currency.USD: 1.0})
        with pytest.raises(InvalidRateError, match="ETH"):
            convert_currency_with_rates(Price(1, Currency.ETH), Currency.USD, snapshot)

    @pytest.mark.parametrize("bad_rate", [0, 0.0, -1.5, math.nan, math.inf])
    def test_invalid_target_rate(self, bad_rate):
        snapshot = ExchangeRates({Currency.ETH: 2000.0, Currency.USD: bad_rate})
        with pytest.raises(InvalidRateError):
            convert_currency_with_rates(Price(10 ** 18, Currency.ETH), Currency.USD, snapshot)

    def test_invalid_source_rate(self):
        snapshot = ExchangeRates({Currency.ETH: -2000.0, Currency.USD: 1.0})
        with pytest.raises(InvalidRateError):
            convert_currency_with_rates(Price(10 ** 18, Currency.ETH), Currency.USD, snapshot)

    def test_huge_price_raises_overflow(self, rates):
        with pytest.raises(PriceOverflowError):
            convert_currency_with_rates(Price(10 ** 400, Currency.USD), Currency.ETH, rates)

    def test_huge_converted_value_raises_overflow(self):
        snapshot = ExchangeRates({Currency.ETH: 1e300, Currency.USD: 1.0})
        with pytest.raises(PriceOverflowError):
            convert_currency_with_rates(Price(10 ** 30, Currency.ETH), Currency.USD, snapshot)

    def test_does_not_mutate_rates(self, rates):
        before = dict(rates.rates)
        convert_currency_with_rates(Price(10 ** 18, Currency.ETH), Currency.DAI, rates)
        assert dict(rates.rates) == before


class TestConversionService:
    def test_init(self):
        source = Mock()
        service = ConversionService(source=source)
        assert service.source == source

    def test_convert(self, rates):
        source = Mock()
        source.exchange_rates.return_value = rates

        service = ConversionService(source=source)
        result = service.convert(Price(10 ** 18, Currency.ETH), Currency.USD)

        assert result == Price(227757, Currency.USD)
        source.exchange_rates.assert_called_once()

    def test_convert_all_uses_one_snapshot(self, rates):
        source = Mock()
        source.exchange_rates.return_value = rates

        service = ConversionService(source=source)
        results = service.convert_all(
            [Price(10 ** 18, Currency.ETH), Price(2 * 10 ** 18, Currency.WETH)],
            Currency.USD,
        )

        assert results == [Price(227757, Currency.USD), Price(455513, Currency.USD)]
        source.exchange_rates.assert_called_once()

    def test_convert_propagates_rate_errors(self):
        source = Mock()
        source.exchange_rates.return_value = ExchangeRates({Currency.USD: 1.0})

        service = ConversionService(source=source)
        with pytest.raises(InvalidRateError):
            service.convert(Price(1, Currency.DAI), Currency.USD)
