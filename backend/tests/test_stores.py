"""
Tests for the settings store, lead store and admin auth.
"""

import json

import pytest

from solarsmart.config import DEFAULT_USD_RATE, Orientation
from solarsmart.engine.auth import AdminAuth
from solarsmart.engine.calculator import compute
from solarsmart.engine.errors import InputValidationError, LeadNotFoundError
from solarsmart.engine.lead_store import LeadStore
from solarsmart.engine.reference_data import get_city
from solarsmart.engine.settings_store import SettingsStore
from solarsmart.models.calculation import CalculationInput, Configuration
from solarsmart.models.lead import LeadContact, LeadStatus
from solarsmart.models.settings import SettingsUpdate


def _contact(name: str = "Ayşe Yılmaz") -> LeadContact:
    return LeadContact(full_name=name, phone="+90 555 000 0000", email="ayse@example.com")


def _store_lead(store: LeadStore, name: str = "Ayşe Yılmaz"):
    calc_input = CalculationInput(
        city_id=35, roof_area=80.0, orientation=Orientation.SOUTH_WEST, bill_amount=900.0
    )
    result = compute(calc_input, Configuration())
    return store.create(_contact(name), get_city(35), calc_input, result), result


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

class TestSettingsStore:
    def test_defaults(self):
        assert SettingsStore().get() == Configuration()

    def test_partial_update_keeps_other_fields(self):
        store = SettingsStore()
        config = store.update(SettingsUpdate(electricity_price=4.2))
        assert config.electricity_price == 4.2
        assert config.usd_rate == DEFAULT_USD_RATE
        assert store.get() == config

    def test_invalid_update_rejected(self):
        store = SettingsStore()
        with pytest.raises(InputValidationError) as exc_info:
            store.update(SettingsUpdate(panel_wattage=0.0))
        assert exc_info.value.field == "panel_wattage"
        assert store.get() == Configuration()

    def test_stored_file_merged_over_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"usd_rate": 40.0, "legacy_field": 1}))
        config = SettingsStore(str(path)).get()
        assert config.usd_rate == 40.0
        assert config.panel_wattage == Configuration().panel_wattage

    def test_update_written_to_file(self, tmp_path):
        path = tmp_path / "settings.json"
        SettingsStore(str(path)).update(SettingsUpdate(system_cost_per_kw=690.0))
        assert SettingsStore(str(path)).get().system_cost_per_kw == 690.0


# ---------------------------------------------------------------------------
# Leads
# ---------------------------------------------------------------------------

class TestLeadStore:
    def setup_method(self):
        self.store = LeadStore()

    def test_create_copies_result(self):
        lead, result = _store_lead(self.store)
        assert lead.status == LeadStatus.NEW
        assert lead.city == "İzmir"
        assert lead.system_size_kw == result.system_size_kw
        assert lead.estimated_cost_usd == result.total_cost_usd
        assert lead.estimated_cost_local == result.total_cost_local
        assert lead.bill_amount == 900.0
        assert lead.roof_area == 80.0

    def test_newest_first(self):
        first, _ = _store_lead(self.store, "First")
        second, _ = _store_lead(self.store, "Second")
        assert [lead.id for lead in self.store.list_leads()] == [second.id, first.id]

    def test_update_status(self):
        lead, _ = _store_lead(self.store)
        updated = self.store.update_status(lead.id, LeadStatus.CONTACTED)
        assert updated.status == LeadStatus.CONTACTED
        assert self.store.get(lead.id).status == LeadStatus.CONTACTED

    def test_filter_by_status(self):
        a, _ = _store_lead(self.store, "A")
        _store_lead(self.store, "B")
        self.store.update_status(a.id, LeadStatus.CLOSED)
        closed = self.store.list_leads(LeadStatus.CLOSED)
        assert [lead.id for lead in closed] == [a.id]

    def test_unknown_lead(self):
        with pytest.raises(LeadNotFoundError):
            self.store.update_status("missing", LeadStatus.CLOSED)
        with pytest.raises(LeadNotFoundError):
            self.store.get("missing")

    def test_file_round_trip(self, tmp_path):
        path = str(tmp_path / "leads.json")
        store = LeadStore(path)
        lead, _ = _store_lead(store)
        store.update_status(lead.id, LeadStatus.OFFER_SENT)

        reloaded = LeadStore(path).get(lead.id)
        assert reloaded.status == LeadStatus.OFFER_SENT
        assert reloaded.full_name == "Ayşe Yılmaz"


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------

class TestAdminAuth:
    def setup_method(self):
        self.auth = AdminAuth("s3cret")

    def test_wrong_password(self):
        assert self.auth.login("nope") is None

    def test_login_issues_token(self):
        token = self.auth.login("s3cret")
        assert token
        assert self.auth.is_authenticated(token)

    def test_tokens_are_unique(self):
        assert self.auth.login("s3cret") != self.auth.login("s3cret")

    def test_logout(self):
        token = self.auth.login("s3cret")
        self.auth.logout(token)
        assert not self.auth.is_authenticated(token)

    def test_missing_token(self):
        assert not self.auth.is_authenticated(None)
