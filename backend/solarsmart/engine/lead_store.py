"""
Lead list kept for admin review.

Leads live in memory, newest first. When a path is given the list is loaded
from and rewritten to that JSON file after every change; there is no
locking or durability beyond that.
"""

import json
import logging
import os
import uuid
from datetime import datetime, timezone
from typing import Optional

from solarsmart.engine.errors import LeadNotFoundError
from solarsmart.models.calculation import CalculationInput, CalculationResult, City
from solarsmart.models.lead import Lead, LeadContact, LeadStatus

logger = logging.getLogger(__name__)


class LeadStore:
    def __init__(self, path: Optional[str] = None):
        self._path = path
        self._leads: list[Lead] = []
        if path and os.path.exists(path):
            with open(path, "r", encoding="utf-8") as f:
                self._leads = [Lead.model_validate(item) for item in json.load(f)]

    def create(
        self,
        contact: LeadContact,
        city: City,
        calc_input: CalculationInput,
        result: CalculationResult,
    ) -> Lead:
        """Store a new lead with status New and return it."""
        lead = Lead(
            id=uuid.uuid4().hex[:12],
            full_name=contact.full_name,
            phone=contact.phone,
            email=contact.email,
            city=city.name,
            district=contact.district,
            bill_amount=calc_input.bill_amount,
            roof_area=calc_input.roof_area,
            system_size_kw=result.system_size_kw,
            estimated_cost_usd=result.total_cost_usd,
            estimated_cost_local=result.total_cost_local,
            status=LeadStatus.NEW,
            created_at=datetime.now(timezone.utc),
        )
        self._leads.insert(0, lead)
        self._save()
        logger.info("Lead %s created for %s", lead.id, lead.city)
        return lead

    def list_leads(self, status: Optional[LeadStatus] = None) -> list[Lead]:
        if status is None:
            return list(self._leads)
        return [lead for lead in self._leads if lead.status == status]

    def get(self, lead_id: str) -> Lead:
        for lead in self._leads:
            if lead.id == lead_id:
                return lead
        raise LeadNotFoundError(lead_id)

    def update_status(self, lead_id: str, status: LeadStatus) -> Lead:
        for idx, lead in enumerate(self._leads):
            if lead.id == lead_id:
                updated = lead.model_copy(update={"status": status})
                self._leads[idx] = updated
                self._save()
                logger.info("Lead %s status %s -> %s", lead_id, lead.status.value, status.value)
                return updated
        raise LeadNotFoundError(lead_id)

    def _save(self) -> None:
        if not self._path:
            return
        with open(self._path, "w", encoding="utf-8") as f:
            json.dump([lead.model_dump(mode="json") for lead in self._leads], f, indent=2)
