"""
Bulletin Parser - CNB Daily Bulletin to Exchange Rates

This module turns the raw text of the Czech National Bank daily exchange-rate
bulletin into ExchangeRate values against CZK, keeping only the currencies the
caller asked for.

Bulletin layout (lines separated by "\\n"):

    18 Oct 2026 #201
    Country|Currency|Amount|Code|Rate
    Australia|dollar|1|AUD|15,612
    Japan|yen|100|JPY|16,047
    ...

The first two lines are headers and are not inspected. Every other non-blank
line must have exactly five pipe-separated fields. Numbers use a comma as the
decimal separator regardless of the host locale.

Files that USE this module:
- cnbrates.application.rates_service (ExchangeRateProvider parses fetched text)
- tests.test_bulletin_parser (unit tests)

Files that this module USES:
- cnbrates.domain.models (Currency, ExchangeRate, BASE_CURRENCY_CODE)
- cnbrates.domain.errors (InvalidArgumentError, MalformedInputError, ...)
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Context, Decimal, DecimalException, localcontext
from typing import List, Mapping, Optional, Tuple

from cnbrates.domain.errors import (
    DomainError,
    InvalidArgumentError,
    InvalidRateError,
    MalformedInputError,
    NumberFormatError,
)
from cnbrates.domain.models import BASE_CURRENCY_CODE, Currency, ExchangeRate

log = logging.getLogger(__name__)

HEADER_LINES = 2
FIELD_COUNT = 5

# field positions in a data line: country|currency name|amount|code|rate
_AMOUNT, _CODE, _RATE = 2, 3, 4

_INTEGER_RE = re.compile(r"\s*([+-]?[0-9]+)\s*")
_DECIMAL_RE = re.compile(r"\s*([+-]?)([0-9]+)(?:,([0-9]+))?\s*")

# template for division; copied per call so flags never accumulate here
_CONTEXT = Context(prec=28, rounding=ROUND_HALF_EVEN)


def parse_integer(token: str) -> int:
    """
    Parse an integer token such as "100" or "+1".

    Raises:
        NumberFormatError: If the token is not an optionally signed run of digits
    """
    match = _INTEGER_RE.fullmatch(token)
    if match is None:
        raise NumberFormatError(f"{token!r} is not a valid integer")
    try:
        return int(match.group(1))
    except ValueError as e:
        raise NumberFormatError(f"integer token of {len(token)} characters is too long") from e


def parse_decimal(token: str) -> Decimal:
    """
    Parse a comma-decimal token such as "25,123" or "-0,5" into a Decimal.

    Raises:
        NumberFormatError: If the token does not follow the [sign]digits[,digits] form
    """
    match = _DECIMAL_RE.fullmatch(token)
    if match is None:
        raise NumberFormatError(f"{token!r} is not a valid decimal number")
    sign, whole, fraction = match.groups()
    text = f"{sign}{whole}.{fraction}" if fraction else f"{sign}{whole}"
    return Decimal(text)


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of a parse: either the rates or the error that stopped the parse.

    Attributes:
        rates: Parsed rates in bulletin order (empty when error is set)
        error: The failure, or None on success
    """
    rates: Tuple[ExchangeRate, ...] = ()
    error: Optional[DomainError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> List[ExchangeRate]:
        """Return the rates as a list, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return list(self.rates)


def _check_arguments(raw_text: Optional[str], requested: Mapping[str, Currency]) -> None:
    if not requested or BASE_CURRENCY_CODE not in requested:
        raise InvalidArgumentError(
            f"Specified currencies do not contain Czech currency ({BASE_CURRENCY_CODE})"
        )
    if raw_text is None:
        raise InvalidArgumentError("Bulletin text must not be None.")
    if not raw_text.strip():
        raise InvalidArgumentError("Bulletin text cannot be empty or whitespace only.")


def _parse_line(
    line_number: int,
    line: str,
    requested: Mapping[str, Currency],
    base: Currency,
) -> Optional[ExchangeRate]:
    """Parse one data line; returns None for currencies nobody asked for."""
    fields = line.split("|")
    if len(fields) != FIELD_COUNT:
        raise MalformedInputError.for_line(
            line_number, line, f"Expected {FIELD_COUNT} fields, got {len(fields)}."
        )

    try:
        rate = parse_decimal(fields[_RATE])
        amount = parse_integer(fields[_AMOUNT])
    except NumberFormatError as e:
        raise MalformedInputError.for_line(line_number, line) from e

    currency = requested.get(fields[_CODE])
    if currency is None or currency == base:
        return None

    try:
        if amount == 0:
            raise InvalidRateError("amount must not be zero")
        with localcontext(_CONTEXT) as ctx:
            value = ctx.divide(rate, Decimal(amount))
        return ExchangeRate(currency, base, value)
    except (InvalidRateError, DecimalException) as e:
        raise MalformedInputError.for_line(line_number, line) from e


def _parse(raw_text: Optional[str], requested: Mapping[str, Currency]) -> List[ExchangeRate]:
    _check_arguments(raw_text, requested)

    lines = raw_text.split("\n")
    if len(lines) < HEADER_LINES + 1:
        raise MalformedInputError(
            f"Invalid data file format - too few lines. "
            f"Expected at least {HEADER_LINES + 1}, got {len(lines)}.",
            line_count=len(lines),
        )

    base = requested[BASE_CURRENCY_CODE]
    rates: List[ExchangeRate] = []
    seen = set()
    for index in range(HEADER_LINES, len(lines)):
        line = lines[index]
        if not line.strip():
            continue
        rate = _parse_line(index + 1, line, requested, base)
        if rate is None:
            continue
        code = rate.source_currency.code
        if code in seen:
            log.warning("Duplicate bulletin entry for %s on line %d ignored", code, index + 1)
            continue
        seen.add(code)
        rates.append(rate)

    log.debug("Parsed %d exchange rates from %d bulletin lines", len(rates), len(lines))
    return rates


def parse_bulletin(raw_text: Optional[str], requested: Mapping[str, Currency]) -> ParseResult:
    """
    Parse a CNB bulletin into per-unit rates against CZK.

    Args:
        raw_text: Full bulletin text as published
        requested: Catalog of wanted currencies keyed by code; must contain CZK

    Returns:
        ParseResult holding the rates in bulletin order, or the first error met:
        InvalidArgumentError for unusable arguments, MalformedInputError for a
        bulletin that breaks the format. No partial result is ever returned.
    """
    try:
        return ParseResult(rates=tuple(_parse(raw_text, requested)))
    except DomainError as e:
        log.warning("Bulletin parse failed: %s", e)
        return ParseResult(error=e)


def parse_bulletin_or_raise(
    raw_text: Optional[str], requested: Mapping[str, Currency]
) -> List[ExchangeRate]:
    """Same as parse_bulletin but raises the error instead of returning it."""
    return parse_bulletin(raw_text, requested).unwrap()
