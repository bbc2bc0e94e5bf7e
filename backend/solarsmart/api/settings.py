"""
API routes for business settings.
"""

from fastapi import APIRouter, Depends, HTTPException

from solarsmart.api.deps import get_settings_store, require_admin
from solarsmart.engine.errors import InputValidationError
from solarsmart.engine.settings_store import SettingsStore
from solarsmart.models.calculation import Configuration
from solarsmart.models.settings import SettingsUpdate

router = APIRouter(prefix="/api/v1/settings", tags=["settings"])


@router.get("", response_model=Configuration)
async def read_settings(settings: SettingsStore = Depends(get_settings_store)) -> Configuration:
    return settings.get()


@router.put("", response_model=Configuration, dependencies=[Depends(require_admin)])
async def update_settings(
    data: SettingsUpdate,
    settings: SettingsStore = Depends(get_settings_store),
) -> Configuration:
    """Update any subset of the settings. Every value must stay positive."""
    try:
        return settings.update(data)
    except InputValidationError as e:
        raise HTTPException(status_code=422, detail={"field": e.field, "message": str(e)})
