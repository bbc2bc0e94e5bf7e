"""
Pydantic models for admin-managed settings.
"""

from typing import Optional

from pydantic import BaseModel


class SettingsUpdate(BaseModel):
    """Partial settings update; omitted fields keep their current value."""

    usd_rate: Optional[float] = None
    electricity_price: Optional[float] = None
    panel_wattage: Optional[float] = None
    system_cost_per_kw: Optional[float] = None
