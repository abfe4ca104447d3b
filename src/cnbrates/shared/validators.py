"""
Input Validation Utilities - Configuration and User Input Validation

This module provides validation functions for currency codes, code lists and
source URLs, used by the settings model and the command-line entry point.

Files that USE this module:
- cnbrates.config.settings (uses validation functions in Settings field validators)
- cnbrates.app (validates currency codes given on the command line)

Files that this module USES:
- None (pure utility functions)
"""
import re
from typing import List
from urllib.parse import urlparse


def validate_currency_code(code: str) -> bool:
    """
    Validate a currency code (three uppercase ASCII letters).

    Args:
        code: Currency code to validate

    Returns:
        True if valid, False otherwise
    """
    if not code:
        return False
    return bool(re.fullmatch(r"[A-Z]{3}", code))


def split_currency_codes(value: str) -> List[str]:
    """
    Split a comma/space separated list of codes, uppercasing each one.

    Args:
        value: e.g. "usd, EUR,jpy"

    Returns:
        List of codes in input order, empty items dropped
    """
    if not value:
        return []
    return [part.strip().upper() for part in re.split(r"[,\s]+", value) if part.strip()]


def validate_url(url: str) -> bool:
    """
    Validate an HTTP(S) URL.

    Args:
        url: URL to validate

    Returns:
        True if the URL has an http/https scheme and a host, False otherwise
    """
    if not url:
        return False

    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)
