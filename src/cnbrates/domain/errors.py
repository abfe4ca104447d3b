"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions raised when caller input,
bulletin content or a rate value breaks the rules of the domain.

Files that USE this module:
- cnbrates.domain.models (Currency and ExchangeRate validation)
- cnbrates.application.bulletin_parser (parse failures)
- cnbrates.application.rates_service (catalog validation)
- cnbrates.adapters.providers.* (fetch failures)
- cnbrates.app (reports errors to the user)

Files that this module USES:
- None (pure domain layer)
"""
from typing import Optional


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class InvalidArgumentError(DomainError, ValueError):
    """Raised when the caller passes unusable input (missing CZK, blank bulletin...)."""
    pass


class InvalidCurrencyError(InvalidArgumentError):
    """Raised when a currency code is not three uppercase letters."""
    pass


class InvalidRateError(DomainError, ValueError):
    """Raised when a rate value is invalid (e.g., negative or zero)."""
    pass


class NumberFormatError(DomainError, ValueError):
    """Raised when a bulletin token does not follow the comma-decimal convention."""
    pass


class BulletinUnavailableError(DomainError):
    """Raised when the bulletin text cannot be obtained from its source."""
    pass


class MalformedInputError(DomainError):
    """
    Raised when the bulletin text does not follow the expected structure.

    Attributes:
        line_number: 1-based number of the offending line (None for whole-text errors)
        line: Raw content of the offending line
        line_count: Number of lines found, for the too-few-lines case
    """

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
        line_count: Optional[int] = None,
    ):
        super().__init__(message)
        self.line_number = line_number
        self.line = line
        self.line_count = line_count

    @classmethod
    def for_line(
        cls, line_number: int, line: str, detail: Optional[str] = None
    ) -> "MalformedInputError":
        """Build the error reported for a data line that cannot be parsed."""
        message = (
            f'Invalid file format - Error on line {line_number}: "{line}" '
            f"cannot be parsed as exchange rate."
        )
        if detail:
            message = f"{message} {detail}"
        return cls(
            message,
            line_number=line_number,
            line=line,
        )
