"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from cnbrates.domain.models import (
    BASE_CURRENCY_CODE,
    Currency,
    ExchangeRate,
)
from cnbrates.domain.errors import (
    BulletinUnavailableError,
    DomainError,
    InvalidArgumentError,
    InvalidCurrencyError,
    InvalidRateError,
    MalformedInputError,
    NumberFormatError,
)

__all__ = [
    "BASE_CURRENCY_CODE",
    "Currency",
    "ExchangeRate",
    "DomainError",
    "InvalidArgumentError",
    "InvalidCurrencyError",
    "InvalidRateError",
    "MalformedInputError",
    "NumberFormatError",
    "BulletinUnavailableError",
]
