# src/cnbrates/adapters/providers/base.py
"""
Base Interface for Bulletin Sources

This module defines the abstract base class for everything that can supply
the raw text of a daily exchange-rate bulletin.

Files that USE this module:
- cnbrates.adapters.providers.cnb (CnbBulletinClient implements BulletinSource)
- cnbrates.adapters.providers.file (FileBulletinSource implements BulletinSource)
- cnbrates.application.rates_service (ExchangeRateProvider depends on BulletinSource)

Files that this module USES:
- None (pure interface definition)
"""
from abc import ABC, abstractmethod
from datetime import date
from typing import Optional


class BulletinSource(ABC):
    @abstractmethod
    def fetch_bulletin(self, on_date: Optional[date] = None) -> str:
        """
        Return the complete raw bulletin text.

        Args:
            on_date: Bulletin date; None means the latest one

        Raises:
            BulletinUnavailableError: If the text cannot be obtained
        """
        raise NotImplementedError
