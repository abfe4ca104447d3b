"""
Rate Formatter - Text Presentation of Exchange Rates

Renders exchange rates as "SRC/TGT=value" lines for the command line.

Files that USE this module:
- cnbrates.app (prints parsed rates)
- tests.test_formatter (unit tests)

Files that this module USES:
- cnbrates.domain.models (ExchangeRate)
"""
from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal
from typing import Iterable, Optional

from cnbrates.domain.models import ExchangeRate

NO_RATES_MESSAGE = "No exchange rates found."


def _fmt_value(value: Decimal, decimals: Optional[int]) -> str:
    if decimals is None:
        return str(value)
    return str(value.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_EVEN))


def format_rate(rate: ExchangeRate, decimals: Optional[int] = None) -> str:
    """
    Format one rate, e.g. "EUR/CZK=25.123".

    Args:
        rate: Rate to format
        decimals: Round the value to this many places (default: print as parsed)
    """
    return f"{rate.source_currency}/{rate.target_currency}={_fmt_value(rate.value, decimals)}"


def format_rates(rates: Iterable[ExchangeRate], decimals: Optional[int] = None) -> str:
    """Format rates one per line, or a notice when there are none."""
    lines = [format_rate(rate, decimals) for rate in rates]
    if not lines:
        return NO_RATES_MESSAGE
    return "\n".join(lines)
