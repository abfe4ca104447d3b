"""
Domain Models - Pure Business Objects

This module contains the value objects of the rates domain:
- Currency (identity by ISO-style 3-letter code)
- ExchangeRate (source/target pair with a per-unit value)

Files that USE this module:
- cnbrates.application.* (parser and service build and return domain models)
- cnbrates.adapters.formatting (renders exchange rates)
- cnbrates.app (builds the requested currencies)
- tests.* (tests use domain models for test data)

Files that this module USES:
- cnbrates.domain.errors (validation errors)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import re  # Regular expression for the currency code format
from dataclasses import dataclass  # Decorator for creating data classes
from decimal import Decimal  # Exact decimal arithmetic for rates

from cnbrates.domain.errors import InvalidCurrencyError, InvalidRateError

BASE_CURRENCY_CODE = "CZK"

_CODE_RE = re.compile(r"[A-Z]{3}")


@dataclass(frozen=True)
class Currency:
    """
    A currency identified solely by its 3-letter uppercase code.

    Attributes:
        code: Currency code, e.g. "CZK" or "EUR"
    """
    code: str

    def __post_init__(self):
        if not isinstance(self.code, str) or not _CODE_RE.fullmatch(self.code):
            raise InvalidCurrencyError(
                f"Currency code must be exactly 3 uppercase letters, got {self.code!r}"
            )

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class ExchangeRate:
    """
    One unit of source_currency equals value units of target_currency.

    Attributes:
        source_currency: Currency being priced
        target_currency: Currency the price is expressed in
        value: Strictly positive per-unit rate
    """
    source_currency: Currency
    target_currency: Currency
    value: Decimal

    def __post_init__(self):
        if self.source_currency == self.target_currency:
            raise InvalidRateError(
                f"source and target currency must differ, got {self.source_currency}"
            )
        if not self.value > 0:
            raise InvalidRateError(f"rate value must be positive, got {self.value}")

    def __str__(self) -> str:
        return f"{self.source_currency}/{self.target_currency}={self.value}"
