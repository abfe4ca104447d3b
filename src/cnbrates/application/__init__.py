"""
Application Layer - Use Cases and Services

This package contains the bulletin parser and the service that feeds it.
No direct I/O - bulletin text comes in through the BulletinSource interface.
"""

from cnbrates.application.bulletin_parser import (
    ParseResult,
    parse_bulletin,
    parse_bulletin_or_raise,
)
from cnbrates.application.rates_service import ExchangeRateProvider, build_catalog

__all__ = [
    "ParseResult",
    "parse_bulletin",
    "parse_bulletin_or_raise",
    "ExchangeRateProvider",
    "build_catalog",
]
