"""
FastAPI Routes: site settings.
"""

from fastapi import APIRouter, Depends

from kitchen_cursor.api.dependencies import get_current_admin, get_site_settings_service
from kitchen_cursor.api.schemas.site_settings_schemas import (
    SiteSettingsResponse,
    UpdateSiteSettingsRequest,
)
from kitchen_cursor.application.services.site_settings_service import SiteSettingsService

router = APIRouter(
    prefix="/admin/site-settings",
    tags=["site-settings"],
    dependencies=[Depends(get_current_admin)],
)


@router.get("", response_model=SiteSettingsResponse)
async def get_site_settings(service: SiteSettingsService = Depends(get_site_settings_service)):
    return SiteSettingsResponse.from_entity(await service.get_or_create())


@router.put("", response_model=SiteSettingsResponse)
async def update_site_settings(
    request: UpdateSiteSettingsRequest,
    service: SiteSettingsService = Depends(get_site_settings_service)
):
    settings = await service.update(request.model_dump(exclude_unset=True))
    return SiteSettingsResponse.from_entity(settings)
