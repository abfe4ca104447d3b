"""
Application Entry Point - Command Line Interface

This module serves as the composition root for cnbrates. It reads settings,
configures logging, picks a bulletin source and prints today's CNB rates for
the requested currencies.

Usage:
    cnbrates                      # currencies from CNB_CURRENCIES
    cnbrates EUR USD JPY          # CZK is always added
    cnbrates --file daily.txt EUR # parse a saved bulletin
    cnbrates --date 2026-10-16 EUR --decimals 3

Files that USE this module:
- cnbrates.__main__ (python -m cnbrates)
- cnbrates console script (pyproject.toml)

Files that this module USES:
- cnbrates.shared.logging_conf (setup_logging for logging configuration)
- cnbrates.config (settings for defaults)
- cnbrates.application.rates_service (ExchangeRateProvider)
- cnbrates.adapters.providers (CnbBulletinClient, FileBulletinSource)
- cnbrates.adapters.formatting (format_rates)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging messages and errors
from datetime import datetime  # Parsed --date option
from pathlib import Path  # --file option
from typing import List, Optional, Sequence  # Type hints

import typer  # Command line interface

from cnbrates.adapters.formatting.formatter import format_rates  # Output formatting
from cnbrates.adapters.providers import BulletinSource, CnbBulletinClient, FileBulletinSource
from cnbrates.application.rates_service import ExchangeRateProvider  # Rates use case
from cnbrates.config import settings  # Defaults for currencies and logging
from cnbrates.domain.errors import DomainError  # Base of all expected failures
from cnbrates.domain.models import BASE_CURRENCY_CODE, Currency  # Domain models
from cnbrates.shared.logging_conf import setup_logging  # Configure logging with file rotation
from cnbrates.shared.validators import split_currency_codes  # Normalize code lists


app = typer.Typer(add_completion=False, help="Czech National Bank exchange rates against CZK")


def _requested_codes(codes: Sequence[str], default: Sequence[str]) -> List[str]:
    """Normalize requested codes: uppercase, no duplicates, CZK always present."""
    requested: List[str] = []
    for code in split_currency_codes(" ".join(codes)) or list(default):
        if code not in requested:
            requested.append(code)
    if BASE_CURRENCY_CODE not in requested:
        requested.append(BASE_CURRENCY_CODE)
    return requested


def _make_source(file_path: Optional[Path]) -> BulletinSource:
    if file_path:
        return FileBulletinSource(file_path)
    return CnbBulletinClient()


@app.command()
def rates(
    codes: Optional[List[str]] = typer.Argument(
        None, help="Currency codes to look up (default: CNB_CURRENCIES setting)"
    ),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", help="Read the bulletin from a file instead of the CNB web site"
    ),
    on_date: Optional[datetime] = typer.Option(
        None, "--date", "-d", formats=["%Y-%m-%d"], help="Bulletin date (default: latest)"
    ),
    decimals: Optional[int] = typer.Option(
        None, "--decimals", min=0, help="Round rates to this many decimal places"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Print the official CNB rate against CZK for each requested currency."""

    setup_logging(
        level=logging.DEBUG if verbose else settings.log_level_value,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        log_to_stdout=settings.log_stdout,
    )
    logger = logging.getLogger(__name__)

    try:
        currencies = [Currency(code) for code in _requested_codes(codes or [], settings.currency_codes)]
        logger.debug("Requested currencies: %s", ", ".join(c.code for c in currencies))

        provider = ExchangeRateProvider(_make_source(file))
        found = provider.get_exchange_rates(currencies, on_date=on_date.date() if on_date else None)
    except DomainError as e:
        logger.error("Could not retrieve exchange rates: %s", e)
        typer.secho(f"Error: {e}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)

    typer.echo(format_rates(found, decimals))


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
