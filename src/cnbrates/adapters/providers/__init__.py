"""
Provider Adapters - Bulletin Sources

This package contains adapters that supply raw bulletin text.
All sources implement the BulletinSource interface.
"""

from cnbrates.adapters.providers.base import BulletinSource
from cnbrates.adapters.providers.cnb import CnbBulletinClient
from cnbrates.adapters.providers.file import FileBulletinSource

__all__ = [
    "BulletinSource",
    "CnbBulletinClient",
    "FileBulletinSource",
]
