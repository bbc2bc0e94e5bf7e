"""
Pydantic models for captured leads.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from solarsmart.models.calculation import CalculationInput, CalculationResult


class LeadStatus(str, Enum):
    NEW = "New"
    CONTACTED = "Contacted"
    OFFER_SENT = "OfferSent"
    CLOSED = "Closed"


class LeadContact(BaseModel):
    """Contact details entered on the last wizard step."""

    full_name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+$")
    district: Optional[str] = None


class LeadCreate(LeadContact):
    """Contact details plus the calculation they were shown."""

    calculation: CalculationInput


class Lead(BaseModel):
    """A stored lead as reviewed by an admin."""

    id: str
    full_name: str
    phone: str
    email: str
    city: str
    district: Optional[str] = None
    bill_amount: float
    roof_area: float
    system_size_kw: float
    estimated_cost_usd: int
    estimated_cost_local: int
    status: LeadStatus = LeadStatus.NEW
    created_at: datetime


class LeadCreateOutput(BaseModel):
    """Stored lead together with the result it was created from."""

    lead: Lead
    result: CalculationResult


class LeadStatusUpdate(BaseModel):
    status: LeadStatus
