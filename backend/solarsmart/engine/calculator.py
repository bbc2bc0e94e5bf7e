"""
Solar system sizing and financial projection.

Sizing chain:
  monthly kWh      = bill / electricity price
  required kWp     = annual kWh / (sun hours × direction factor × 365 × 0.85)
  roof cap kWp     = roof area / 6 m²
  panels           = ceil(min(required, cap) × 1000 / panel W)
  final kWp        = panels × panel W / 1000

Financials, production and CO₂ are derived from the final kWp. Values keep
full precision until the result is built; rounding (half away from zero)
happens only there.
"""

import logging
import math
from decimal import ROUND_HALF_UP, Context, Decimal

from solarsmart.config import (
    CO2_KG_PER_KWH,
    DAYS_PER_YEAR,
    MONTHS_PER_YEAR,
    ROOF_AREA_PER_KW,
    SYSTEM_EFFICIENCY,
)
from solarsmart.engine.errors import DegenerateResultError, InputValidationError
from solarsmart.engine.reference_data import get_direction_factor, get_insolation
from solarsmart.models.calculation import (
    CalculationInput,
    CalculationResult,
    Configuration,
)

logger = logging.getLogger(__name__)

# Wide enough to quantize any finite float
_ROUNDING_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def validate_configuration(config: Configuration) -> None:
    """Raise InputValidationError if any business parameter is not positive."""
    _require_positive("usd_rate", config.usd_rate)
    _require_positive("electricity_price", config.electricity_price)
    _require_positive("panel_wattage", config.panel_wattage)
    _require_positive("system_cost_per_kw", config.system_cost_per_kw)


def required_capacity_kw(annual_consumption: float, effective_sun_hours: float) -> float:
    """Capacity (kWp) needed to offset the whole annual consumption."""
    return annual_consumption / (effective_sun_hours * DAYS_PER_YEAR * SYSTEM_EFFICIENCY)


def max_capacity_by_roof(roof_area: float) -> float:
    """Largest capacity (kWp) the roof area can hold."""
    return roof_area / ROOF_AREA_PER_KW


def compute(calc_input: CalculationInput, config: Configuration) -> CalculationResult:
    """
    Size a PV system for the given roof and bill and project its payback.

    Raises:
        InputValidationError: a roof/bill/configuration value is not a
            positive finite number.
        LocationNotFoundError: the city id is unknown.
        DegenerateResultError: the recommended system produces no savings,
            or a derived figure overflows.
    """
    ci = calc_input

    _require_positive("roof_area", ci.roof_area)
    _require_positive("bill_amount", ci.bill_amount)
    validate_configuration(config)

    insolation = get_insolation(ci.city_id)
    direction_factor = get_direction_factor(ci.orientation)

    # Consumption
    monthly_kwh = ci.bill_amount / config.electricity_price
    annual_consumption = _require_finite("annual_consumption", monthly_kwh * MONTHS_PER_YEAR)

    # Capacity: offset everything unless the roof is the limit
    effective_sun_hours = insolation * direction_factor
    if not effective_sun_hours > 0:
        raise DegenerateResultError("Location and orientation give no usable sun hours")
    required = _require_finite(
        "required_capacity", required_capacity_kw(annual_consumption, effective_sun_hours)
    )
    roof_cap = max_capacity_by_roof(ci.roof_area)
    system_size_kw = min(required, roof_cap)

    panels_exact = _require_finite("panel_count", system_size_kw * 1000 / config.panel_wattage)
    panel_count = math.ceil(panels_exact)
    if panel_count <= 0:
        raise DegenerateResultError(
            "Recommended system has no panels; roof too small to size a system"
        )
    final_size_kw = panel_count * config.panel_wattage / 1000

    # Financials
    total_cost_usd = _require_finite("total_cost_usd", final_size_kw * config.system_cost_per_kw)
    total_cost_local = _require_finite("total_cost_local", total_cost_usd * config.usd_rate)

    annual_production = _require_finite(
        "annual_production",
        final_size_kw * effective_sun_hours * DAYS_PER_YEAR * SYSTEM_EFFICIENCY,
    )
    annual_savings = _require_finite("annual_savings", annual_production * config.electricity_price)
    if not annual_savings > 0:
        raise DegenerateResultError("Recommended system produces no savings")
    roi_years = _require_finite("roi_years", total_cost_local / annual_savings)

    co2_saved_tons = annual_production * CO2_KG_PER_KWH / 1000

    logger.debug(
        "city=%s orientation=%s required=%.3f kWp cap=%.3f kWp panels=%d",
        ci.city_id, ci.orientation.value, required, roof_cap, panel_count,
    )

    return CalculationResult(
        system_size_kw=_round(final_size_kw, 2),
        panel_count=panel_count,
        annual_production=_round(annual_production),
        annual_consumption=_round(annual_consumption),
        total_cost_usd=_round(total_cost_usd),
        total_cost_local=_round(total_cost_local),
        roi_years=_round(roi_years, 1),
        monthly_savings=_round(annual_savings / MONTHS_PER_YEAR),
        co2_saved_tons=_round(co2_saved_tons, 2),
        roof_limited=roof_cap < required,
    )


def _require_positive(field: str, value: float) -> None:
    if not math.isfinite(value):
        raise InputValidationError(field, "must be a finite number")
    if value <= 0:
        raise InputValidationError(field, "must be greater than zero")


def _require_finite(name: str, value: float) -> float:
    if not math.isfinite(value):
        raise DegenerateResultError(f"{name} overflows; inputs are out of a usable range")
    return value


def _round(value: float, digits: int = 0):
    """Round half away from zero; returns an int when digits is 0."""
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(value).quantize(quantum, context=_ROUNDING_CONTEXT)
    return int(rounded) if digits == 0 else float(rounded)
