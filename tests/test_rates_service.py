"""
Rates Service Tests - Unit Tests for the Exchange Rate Provider

This module contains unit tests for the rates service layer, including
build_catalog and ExchangeRateProvider wiring between a bulletin source and
the parser.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- cnbrates.application.rates_service (ExchangeRateProvider, build_catalog)
- cnbrates.domain (models and errors for test data)
- unittest.mock (Mock for source mocking)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from datetime import date  # Bulletin date for source calls
from decimal import Decimal  # Expected rate values
from unittest.mock import Mock  # Mock objects for testing without real sources

from cnbrates.application.rates_service import ExchangeRateProvider, build_catalog
from cnbrates.domain.errors import (
    BulletinUnavailableError,
    InvalidArgumentError,
    MalformedInputError,
)
from cnbrates.domain.models import Currency, ExchangeRate

BULLETIN = (
    "17 Oct 2026 #200\n"
    "Country|Currency|Amount|Code|Rate\n"
    "EMU|euro|1|EUR|24,315\n"
    "Japan|yen|100|JPY|16,047\n"
    "USA|dollar|1|USD|22,873\n"
)


def currencies(*codes):
    return [Currency(code) for code in codes]


class TestBuildCatalog:
    def test_indexes_by_code(self):
        result = build_catalog(currencies("CZK", "EUR"))
        assert result == {"CZK": Currency("CZK"), "EUR": Currency("EUR")}

    def test_accepts_any_iterable(self):
        result = build_catalog(Currency(code) for code in ("USD", "CZK"))
        assert set(result) == {"USD", "CZK"}

    def test_duplicate_codes_rejected(self):
        with pytest.raises(InvalidArgumentError, match="EUR"):
            build_catalog(currencies("CZK", "EUR", "EUR"))


class TestExchangeRateProvider:
    def test_init(self):
        mock_source = Mock()
        provider = ExchangeRateProvider(source=mock_source)
        assert provider.source == mock_source

    def test_get_exchange_rates(self):
        mock_source = Mock()
        mock_source.fetch_bulletin.return_value = BULLETIN

        provider = ExchangeRateProvider(source=mock_source)
        result = provider.get_exchange_rates(currencies("USD", "EUR", "CZK", "XYZ"))

        assert result == [
            ExchangeRate(Currency("EUR"), Currency("CZK"), Decimal("24.315")),
            ExchangeRate(Currency("USD"), Currency("CZK"), Decimal("22.873")),
        ]
        mock_source.fetch_bulletin.assert_called_once_with(None)

    def test_passes_date_to_source(self):
        mock_source = Mock()
        mock_source.fetch_bulletin.return_value = BULLETIN

        ExchangeRateProvider(mock_source).get_exchange_rates(
            currencies("CZK", "JPY"), on_date=date(2026, 10, 17)
        )

        mock_source.fetch_bulletin.assert_called_once_with(date(2026, 10, 17))

    def test_missing_czk_does_not_fetch(self):
        mock_source = Mock()

        provider = ExchangeRateProvider(mock_source)
        with pytest.raises(InvalidArgumentError, match="CZK"):
            provider.get_exchange_rates(currencies("EUR", "USD"))

        mock_source.fetch_bulletin.assert_not_called()

    def test_source_failure_propagates(self):
        mock_source = Mock()
        mock_source.fetch_bulletin.side_effect = BulletinUnavailableError("down")

        with pytest.raises(BulletinUnavailableError):
            ExchangeRateProvider(mock_source).get_exchange_rates(currencies("CZK", "EUR"))

    def test_malformed_bulletin_raises(self):
        mock_source = Mock()
        mock_source.fetch_bulletin.return_value = "just one line"

        with pytest.raises(MalformedInputError) as exc_info:
            ExchangeRateProvider(mock_source).get_exchange_rates(currencies("CZK", "EUR"))
        assert exc_info.value.line_count == 1

    def test_empty_bulletin_raises_invalid_argument(self):
        mock_source = Mock()
        mock_source.fetch_bulletin.return_value = "  "

        with pytest.raises(InvalidArgumentError):
            ExchangeRateProvider(mock_source).get_exchange_rates(currencies("CZK", "EUR"))
