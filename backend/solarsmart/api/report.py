"""
API route for PDF proposal generation.
"""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from solarsmart.api.calculator import run_calculation
from solarsmart.api.deps import get_settings_store
from solarsmart.engine.proposal_report import generate_proposal
from solarsmart.engine.reference_data import get_city
from solarsmart.engine.settings_store import SettingsStore
from solarsmart.models.report import ProposalInput

router = APIRouter(prefix="/api/v1", tags=["report"])


@router.post("/report/proposal")
async def create_proposal(
    body: ProposalInput,
    settings: SettingsStore = Depends(get_settings_store),
) -> Response:
    """Generate a PDF proposal and return it as a downloadable file."""
    config = settings.get()
    result = run_calculation(body.calculation, config)
    try:
        pdf_bytes = bytes(generate_proposal(
            title=body.title,
            city=get_city(body.calculation.city_id),
            calc_input=body.calculation,
            config=config,
            result=result,
            customer_name=body.customer_name,
            notes=body.notes,
        ))
    except Exception as exc:
        raise HTTPException(status_code=500, detail=str(exc))
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="proposal.pdf"'},
    )
