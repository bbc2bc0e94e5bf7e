"""
API routes for the sizing/financial calculation and its reference data.
"""

from fastapi import APIRouter, Depends, HTTPException

from solarsmart.config import Orientation, Region
from solarsmart.engine.calculator import compute
from solarsmart.engine.errors import (
    DegenerateResultError,
    InputValidationError,
    LocationNotFoundError,
)
from solarsmart.engine.reference_data import (
    DIRECTION_FACTOR,
    INSOLATION_BY_REGION,
    list_cities,
)
from solarsmart.engine.settings_store import SettingsStore
from solarsmart.api.deps import get_settings_store
from solarsmart.models.calculation import (
    CalculationInput,
    CalculationResult,
    City,
    Configuration,
)

router = APIRouter(prefix="/api/v1", tags=["calculator"])


@router.get("/reference/cities", response_model=list[City])
async def cities() -> list[City]:
    return list_cities()


@router.get("/reference/orientations")
async def orientations() -> list[dict]:
    return [
        {"orientation": o.value, "factor": DIRECTION_FACTOR[o]}
        for o in Orientation
    ]


@router.get("/reference/regions")
async def regions() -> list[dict]:
    return [
        {"region": r.value, "peak_sun_hours": INSOLATION_BY_REGION[r]}
        for r in Region
    ]


@router.post("/calculate", response_model=CalculationResult)
async def calculate(
    data: CalculationInput,
    settings: SettingsStore = Depends(get_settings_store),
) -> CalculationResult:
    """
    Recommend a PV system size and payback estimate for the wizard answers.

    Uses the currently saved business settings.
    """
    return run_calculation(data, settings.get())


def run_calculation(data: CalculationInput, config: Configuration) -> CalculationResult:
    """Compute with the given settings, mapping engine errors to HTTP errors."""
    try:
        return compute(data, config)
    except LocationNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InputValidationError as e:
        raise HTTPException(status_code=422, detail={"field": e.field, "message": str(e)})
    except DegenerateResultError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")
