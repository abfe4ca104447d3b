"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from cnbrates.shared.validators import (
    split_currency_codes,
    validate_currency_code,
    validate_url,
)
from cnbrates.shared.logging_conf import setup_logging

__all__ = [
    "validate_currency_code",
    "split_currency_codes",
    "validate_url",
    "setup_logging",
]
