"""
Repository Interface: ISiteSettingsRepository
"""

from abc import ABC, abstractmethod
from typing import Optional

from kitchen_cursor.domain.entities.site_settings import SiteSettings


class ISiteSettingsRepository(ABC):
    """Site settings singleton storage."""

    @abstractmethod
    async def get(self) -> Optional[SiteSettings]:
        """Read the singleton row, None if it was never created."""
        pass

    @abstractmethod
    async def create_if_missing(self, defaults: SiteSettings) -> SiteSettings:
        """
        Insert ``defaults`` under the fixed singleton key unless a row exists.

        Concurrent callers all get the same stored row back.
        """
        pass

    @abstractmethod
    async def update(self, settings: SiteSettings) -> SiteSettings:
        pass
