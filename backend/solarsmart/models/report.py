"""
Pydantic models for PDF proposal generation.
"""

from typing import Optional

from pydantic import BaseModel, Field

from solarsmart.models.calculation import CalculationInput


class ProposalInput(BaseModel):
    """Input for generating a PDF proposal."""

    title: str = "Solar System Proposal"
    customer_name: Optional[str] = Field(
        None, description="Name printed on the proposal, if known"
    )
    calculation: CalculationInput
    notes: Optional[str] = Field(
        None, description="Free-text notes to include in the proposal"
    )
