# src/cnbrates/adapters/providers/file.py
"""
File Bulletin Source - Bulletin Text from Disk

Reads a previously saved bulletin, e.g. for offline runs or replaying a day.

Files that USE this module:
- cnbrates.app (--file option)
- tests.test_providers (unit tests)

Files that this module USES:
- cnbrates.adapters.providers.base (BulletinSource interface)
- cnbrates.domain.errors (BulletinUnavailableError)
"""
import logging
from datetime import date
from pathlib import Path
from typing import Optional, Union

from cnbrates.adapters.providers.base import BulletinSource
from cnbrates.domain.errors import BulletinUnavailableError

log = logging.getLogger(__name__)


class FileBulletinSource(BulletinSource):
    """Bulletin source backed by a UTF-8 text file. The date argument is ignored."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def fetch_bulletin(self, on_date: Optional[date] = None) -> str:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            log.error("Cannot read bulletin file %s: %s", self.path, e)
            raise BulletinUnavailableError(f"Cannot read bulletin file {self.path}: {e}") from e
        log.info("Loaded bulletin from %s", self.path)
        return text
