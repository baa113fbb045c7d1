"""Settings endpoints - hourly rate."""
from fastapi import APIRouter, Depends

from worklog.database import get_database
from worklog.models.settings import UserSettings
from worklog.services.settings_service import SettingsService


router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=UserSettings)
async def get_settings(db=Depends(get_database)):
    """Get the current settings."""
    return SettingsService(db).get_settings()


@router.put("", response_model=UserSettings)
async def update_settings(new_settings: UserSettings, db=Depends(get_database)):
    """Replace the settings record."""
    return SettingsService(db).update_settings(new_settings)
