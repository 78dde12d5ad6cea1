"""
Site Settings Service.

Exactly one settings record exists. It is created with defaults on first
access; the repository keys it on a fixed id, so concurrent first reads
end up with the same row.
"""

import logging
from typing import Any, Dict

from kitchen_cursor.domain.entities.site_settings import SiteSettings
from kitchen_cursor.domain.repositories.site_settings_repository import ISiteSettingsRepository

logger = logging.getLogger(__name__)


class SiteSettingsService:

    def __init__(self, repository: ISiteSettingsRepository):
        self.repository = repository

    async def get_or_create(self) -> SiteSettings:
        settings = await self.repository.get()
        if settings is not None:
            return settings
        return await self.repository.create_if_missing(SiteSettings())

    async def update(self, patch: Dict[str, Any]) -> SiteSettings:
        """
        Apply a partial update.

        Raises:
            DomainValidationError: Unknown fields or empty logo text
        """
        settings = await self.get_or_create()
        settings.apply_patch(patch)
        updated = await self.repository.update(settings)
        logger.info(f"[SiteSettings] Updated fields: {sorted(patch)}")
        return updated
