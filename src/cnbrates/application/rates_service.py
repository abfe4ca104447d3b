"""
Rates Service - Exchange Rates for Requested Currencies

This module wires a bulletin source to the bulletin parser. It builds the
code -> Currency catalog from the caller's currencies, checks that CZK is
among them before anything is fetched, and returns the rates the bulletin
publishes for the requested currencies. Rates are never inverted or derived.

Files that USE this module:
- cnbrates.app (command line asks the provider for rates)
- tests.test_rates_service (unit tests)

Files that this module USES:
- cnbrates.adapters.providers.base (BulletinSource interface)
- cnbrates.application.bulletin_parser (parse_bulletin)
- cnbrates.domain (Currency, ExchangeRate, errors)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging messages
from datetime import date  # Bulletin date type
from typing import Dict, Iterable, List, Optional  # Type hints

from cnbrates.adapters.providers.base import BulletinSource  # Interface for bulletin sources
from cnbrates.application.bulletin_parser import parse_bulletin  # Core bulletin parser
from cnbrates.domain.errors import InvalidArgumentError  # Caller misuse error
from cnbrates.domain.models import BASE_CURRENCY_CODE, Currency, ExchangeRate  # Domain models

log = logging.getLogger(__name__)


def build_catalog(currencies: Iterable[Currency]) -> Dict[str, Currency]:
    """
    Index currencies by code.

    Args:
        currencies: Any iterable of Currency

    Returns:
        Dictionary mapping code to Currency

    Raises:
        InvalidArgumentError: If the same code appears twice
    """
    catalog: Dict[str, Currency] = {}
    for currency in currencies:
        if currency.code in catalog:
            raise InvalidArgumentError(f"Currency {currency.code} is specified more than once")
        catalog[currency.code] = currency
    return catalog


class ExchangeRateProvider:
    """
    Returns the exchange rates among the given currencies that the source defines.

    If the bulletin contains EUR/CZK, CZK/EUR is not computed from it.
    Currencies the bulletin does not publish are ignored.
    """
    def __init__(self, source: BulletinSource):
        """
        Initialize the provider with a bulletin source.

        Args:
            source: Where the raw bulletin text comes from (CNB client, file, stub)
        """
        self.source = source

    def get_exchange_rates(
        self, currencies: Iterable[Currency], on_date: Optional[date] = None
    ) -> List[ExchangeRate]:
        """
        Fetch the bulletin and return rates for the requested currencies.

        Args:
            currencies: Requested currencies; must include CZK
            on_date: Bulletin date (None means the latest)

        Returns:
            Rates against CZK in bulletin order

        Raises:
            InvalidArgumentError: Duplicate codes or CZK missing (nothing is fetched)
            BulletinUnavailableError: The source could not supply the text
            MalformedInputError: The bulletin breaks the expected format
        """
        catalog = build_catalog(currencies)
        if BASE_CURRENCY_CODE not in catalog:
            raise InvalidArgumentError(
                f"Specified currencies do not contain Czech currency ({BASE_CURRENCY_CODE})"
            )

        raw_text = self.source.fetch_bulletin(on_date)
        rates = parse_bulletin(raw_text, catalog).unwrap()
        log.info("Found %d exchange rates for %d requested currencies", len(rates), len(catalog))
        return rates
