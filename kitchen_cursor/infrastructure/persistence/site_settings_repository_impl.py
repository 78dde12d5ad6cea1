# -*- coding: utf-8 -*-
"""
PostgreSQL repository for the site settings singleton.

The row always lives under SITE_SETTINGS_ID. Creation is an insert that
tolerates losing the race: on a primary key conflict the row written by the other
request is read back instead.
"""

import logging
from dataclasses import fields
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from kitchen_cursor.domain.entities.site_settings import SiteSettings, SITE_SETTINGS_ID
from kitchen_cursor.domain.repositories.site_settings_repository import ISiteSettingsRepository
from kitchen_cursor.infrastructure.persistence.models import SiteSettingsModel
from kitchen_cursor.infrastructure.persistence.session_utils import commit_or_rollback
from kitchen_cursor.shared.exceptions.domain_exceptions import DuplicateEntityError
from kitchen_cursor.shared.exceptions.infrastructure_exceptions import DatabaseError

logger = logging.getLogger(__name__)

_FIELDS = [f.name for f in fields(SiteSettings)]


class SiteSettingsRepositoryImpl(ISiteSettingsRepository):
    """Site settings repository adapter."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self) -> Optional[SiteSettings]:
        model = await self.session.get(SiteSettingsModel, SITE_SETTINGS_ID)
        return self._to_entity(model) if model else None

    async def create_if_missing(self, defaults: SiteSettings) -> SiteSettings:
        existing = await self.get()
        if existing:
            return existing

        model = SiteSettingsModel(**{name: getattr(defaults, name) for name in _FIELDS})
        model.id = SITE_SETTINGS_ID
        self.session.add(model)
        try:
            await commit_or_rollback(
                self.session, "Create site settings", duplicate_message="Site settings row exists"
            )
        except DuplicateEntityError:
            logger.info("[SiteSettings] Row created concurrently, reading it back")
            existing = await self.get()
            if existing is None:
                raise DatabaseError("Site settings row vanished after concurrent insert")
            return existing

        await self.session.refresh(model)
        logger.info("[SiteSettings] Created default site settings")
        return self._to_entity(model)

    async def update(self, settings: SiteSettings) -> SiteSettings:
        model = await self.session.get(SiteSettingsModel, SITE_SETTINGS_ID)
        if model is None:
            raise DatabaseError("Site settings row is missing")

        for name in _FIELDS:
            if name != 'id':
                setattr(model, name, getattr(settings, name))

        await commit_or_rollback(self.session, "Update site settings")
        await self.session.refresh(model)
        return self._to_entity(model)

    def _to_entity(self, model: SiteSettingsModel) -> SiteSettings:
        return SiteSettings(**{name: getattr(model, name) for name in _FIELDS})
