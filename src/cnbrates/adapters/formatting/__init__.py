"""
Formatting Adapters - Text Output

This package contains formatting adapters for command-line output.
"""

from cnbrates.adapters.formatting.formatter import (
    NO_RATES_MESSAGE,
    format_rate,
    format_rates,
)

__all__ = [
    "NO_RATES_MESSAGE",
    "format_rate",
    "format_rates",
]
