# src/cnbrates/adapters/providers/cnb.py
"""
CNB Bulletin Client - Czech National Bank Daily Exchange Rates

This module downloads the plain-text daily exchange-rate fixing published by
the Czech National Bank. Parsing is left to cnbrates.application.bulletin_parser.

Files that USE this module:
- cnbrates.app (default bulletin source for the command line)
- tests.test_providers (unit tests)

Files that this module USES:
- cnbrates.adapters.providers.base (BulletinSource interface)
- cnbrates.config (settings for URL and timeout)
- cnbrates.domain.errors (BulletinUnavailableError)
"""
import logging
from datetime import date
from typing import Optional

import requests

from cnbrates.adapters.providers.base import BulletinSource
from cnbrates.config import settings
from cnbrates.domain.errors import BulletinUnavailableError

log = logging.getLogger(__name__)


class CnbBulletinClient(BulletinSource):
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[int] = None):
        """
        Initialize CNB bulletin client.

        Args:
            base_url: Optional custom bulletin URL (defaults to settings.cnb_url)
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds)

        Raises:
            ValueError: If the URL is empty
        """
        self.url = base_url or settings.cnb_url
        if not self.url:
            raise ValueError("CNB_URL is missing.")
        self.timeout = timeout or settings.http_timeout_seconds

    def fetch_bulletin(self, on_date: Optional[date] = None) -> str:
        """
        Download the bulletin text.

        Args:
            on_date: Fixing date; the CNB expects it as DD.MM.YYYY. None means today's.

        Returns:
            Raw bulletin text decoded as UTF-8

        Raises:
            BulletinUnavailableError: On timeout, HTTP error or connection failure
        """
        params = {"date": on_date.strftime("%d.%m.%Y")} if on_date else None

        try:
            log.info("Fetching CNB bulletin from %s (date=%s)", self.url, on_date or "latest")
            resp = requests.get(self.url, params=params, timeout=self.timeout)
            resp.raise_for_status()
        except requests.exceptions.Timeout as e:
            log.warning("CNB bulletin timeout after %d seconds", self.timeout)
            raise BulletinUnavailableError(f"CNB bulletin timeout after {self.timeout}s") from e
        except requests.exceptions.HTTPError as e:
            log.error("CNB bulletin HTTP error: %s", e)
            raise BulletinUnavailableError(f"CNB bulletin HTTP error: {e}") from e
        except requests.exceptions.RequestException as e:
            log.error("CNB bulletin request failed: %s", e)
            raise BulletinUnavailableError(f"CNB bulletin request failed: {e}") from e

        resp.encoding = "utf-8"
        text = resp.text
        log.debug("CNB bulletin downloaded (%d characters)", len(text))
        return text
