"""
Tests for the PDF proposal generator engine and API route.
"""

from fastapi.testclient import TestClient

from solarsmart.api.deps import get_settings_store
from solarsmart.config import Orientation
from solarsmart.engine.calculator import compute
from solarsmart.engine.proposal_report import _latin1, generate_proposal
from solarsmart.engine.reference_data import get_city
from solarsmart.engine.settings_store import SettingsStore
from solarsmart.main import app
from solarsmart.models.calculation import CalculationInput, Configuration

client = TestClient(app)


def _generate(city_id: int = 63, roof_area: float = 200.0, **kwargs) -> bytes:
    calc_input = CalculationInput(
        city_id=city_id,
        roof_area=roof_area,
        orientation=Orientation.SOUTH_EAST,
        bill_amount=2400.0,
    )
    config = Configuration()
    result = compute(calc_input, config)
    return bytes(generate_proposal(
        title="Solar System Proposal",
        city=get_city(city_id),
        calc_input=calc_input,
        config=config,
        result=result,
        **kwargs,
    ))


class TestGenerateProposal:
    def test_returns_pdf(self):
        pdf = _generate()
        assert pdf[:5] == b"%PDF-"
        assert len(pdf) > 500

    def test_turkish_names(self):
        """Şanlıurfa, customer and notes with non-Latin-1 letters still render."""
        pdf = _generate(customer_name="Gülşen Işık", notes="Çatı güneye bakıyor, ağaç yok.")
        assert pdf[:5] == b"%PDF-"

    def test_roof_limited_note(self):
        pdf = _generate(roof_area=6.0)
        assert pdf[:5] == b"%PDF-"


class TestLatin1:
    def test_dotless_and_dotted_i(self):
        assert _latin1("İstanbul") == "Istanbul"
        assert _latin1("Diyarbakır") == "Diyarbakir"

    def test_keeps_latin1_letters(self):
        assert _latin1("Gülşen") == "Gülsen"
        assert _latin1("Çatı") == "Çati"

    def test_superscript_kept(self):
        assert _latin1("120 m²") == "120 m²"

    def test_other_accents_stripped(self):
        assert _latin1("Őrség") == "Orség"


class TestProposalEndpoint:
    def setup_method(self):
        app.dependency_overrides[get_settings_store] = lambda: SettingsStore()

    def teardown_method(self):
        app.dependency_overrides.clear()

    def test_download(self):
        resp = client.post("/api/v1/report/proposal", json={
            "customer_name": "Mehmet Demir",
            "calculation": {
                "city_id": 34,
                "roof_area": 90.0,
                "orientation": "west",
                "bill_amount": 1100.0,
            },
        })
        assert resp.status_code == 200
        assert resp.headers["content-type"] == "application/pdf"
        assert resp.content[:5] == b"%PDF-"

    def test_unknown_city(self):
        resp = client.post("/api/v1/report/proposal", json={
            "calculation": {
                "city_id": 999999,
                "roof_area": 90.0,
                "orientation": "west",
                "bill_amount": 1100.0,
            },
        })
        assert resp.status_code == 404
