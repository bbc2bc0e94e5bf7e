"""
Pydantic models for the sizing/financial calculation.

Positivity of the numeric fields is checked by the calculator itself so that
a violation is reported as an InputValidationError naming the field, both for
API requests and for direct callers.
"""

from pydantic import BaseModel, ConfigDict

from solarsmart.config import (
    Orientation,
    Region,
    DEFAULT_USD_RATE,
    DEFAULT_ELECTRICITY_PRICE,
    DEFAULT_PANEL_WATTAGE,
    DEFAULT_SYSTEM_COST_PER_KW,
)


class City(BaseModel):
    """A selectable location and the climate region it belongs to."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    region: Region


class CalculationInput(BaseModel):
    """Wizard answers for a single calculation."""

    city_id: int
    roof_area: float     # m²
    orientation: Orientation
    bill_amount: float   # local currency per month


class Configuration(BaseModel):
    """Tunable business parameters handed to the calculator."""

    model_config = ConfigDict(frozen=True)

    usd_rate: float = DEFAULT_USD_RATE                        # local currency per USD
    electricity_price: float = DEFAULT_ELECTRICITY_PRICE      # local currency per kWh
    panel_wattage: float = DEFAULT_PANEL_WATTAGE              # W
    system_cost_per_kw: float = DEFAULT_SYSTEM_COST_PER_KW    # USD per kW installed


class CalculationResult(BaseModel):
    """Recommended system and financial projection."""

    model_config = ConfigDict(frozen=True)

    system_size_kw: float       # kWp, 2 dp
    panel_count: int
    annual_production: int      # kWh
    annual_consumption: int     # kWh
    total_cost_usd: int
    total_cost_local: int
    roi_years: float            # 1 dp
    monthly_savings: int        # local currency
    co2_saved_tons: float       # t/yr, 2 dp
    roof_limited: bool = False  # size capped by roof area rather than consumption
