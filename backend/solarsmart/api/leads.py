"""
API routes for lead capture and admin review.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from solarsmart.api.calculator import run_calculation
from solarsmart.api.deps import get_lead_store, get_settings_store, require_admin
from solarsmart.engine.errors import LeadNotFoundError
from solarsmart.engine.lead_store import LeadStore
from solarsmart.engine.reference_data import get_city
from solarsmart.engine.settings_store import SettingsStore
from solarsmart.models.lead import (
    Lead,
    LeadCreate,
    LeadCreateOutput,
    LeadStatus,
    LeadStatusUpdate,
)

router = APIRouter(prefix="/api/v1/leads", tags=["leads"])


@router.post("", response_model=LeadCreateOutput, status_code=201)
async def create_lead(
    data: LeadCreate,
    leads: LeadStore = Depends(get_lead_store),
    settings: SettingsStore = Depends(get_settings_store),
) -> LeadCreateOutput:
    """
    Capture a prospect's contact details.

    The calculation is recomputed server-side so the stored system size and
    cost always match the current settings.
    """
    result = run_calculation(data.calculation, settings.get())
    lead = leads.create(data, get_city(data.calculation.city_id), data.calculation, result)
    return LeadCreateOutput(lead=lead, result=result)


@router.get("", response_model=list[Lead], dependencies=[Depends(require_admin)])
async def list_leads(
    status: Optional[LeadStatus] = None,
    leads: LeadStore = Depends(get_lead_store),
) -> list[Lead]:
    return leads.list_leads(status)


@router.get("/{lead_id}", response_model=Lead, dependencies=[Depends(require_admin)])
async def get_lead(lead_id: str, leads: LeadStore = Depends(get_lead_store)) -> Lead:
    try:
        return leads.get(lead_id)
    except LeadNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.patch("/{lead_id}/status", response_model=Lead, dependencies=[Depends(require_admin)])
async def update_lead_status(
    lead_id: str,
    data: LeadStatusUpdate,
    leads: LeadStore = Depends(get_lead_store),
) -> Lead:
    try:
        return leads.update_status(lead_id, data.status)
    except LeadNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
