"""
PDF proposal generator using fpdf2.

Produces a single-page quote containing:
  - Customer and site summary
  - Recommended system and financial projection
  - Assumptions behind the estimate
  - Optional notes
"""

import unicodedata
from datetime import datetime
from typing import Optional

from fpdf import FPDF

from solarsmart.config import (
    CO2_KG_PER_KWH,
    CURRENCY_LABEL,
    ROOF_AREA_PER_KW,
    SYSTEM_EFFICIENCY,
)
from solarsmart.models.calculation import (
    CalculationInput,
    CalculationResult,
    City,
    Configuration,
)

# Letter with no Latin-1 decomposition
_LATIN1_FALLBACK = str.maketrans({"ı": "i"})

_LABEL_WIDTH = 70


class ProposalPDF(FPDF):
    """Custom FPDF subclass with header/footer."""

    def __init__(self, title: str):
        super().__init__(orientation="P", unit="mm", format="A4")
        self._report_title = _latin1(title)
        self.set_auto_page_break(auto=True, margin=15)

    def header(self):
        self.set_font("Helvetica", "B", 9)
        self.set_text_color(100, 100, 100)
        self.cell(0, 6, self._report_title, align="L")
        self.cell(0, 6, datetime.now().strftime("%Y-%m-%d %H:%M"), align="R", new_x="LMARGIN", new_y="NEXT")
        self.set_draw_color(200, 200, 200)
        self.line(10, self.get_y(), self.w - 10, self.get_y())
        self.ln(3)

    def footer(self):
        self.set_y(-12)
        self.set_font("Helvetica", "I", 7)
        self.set_text_color(150, 150, 150)
        self.cell(0, 8, f"Page {self.page_no()}/{{nb}}", align="C")


def generate_proposal(
    title: str,
    city: City,
    calc_input: CalculationInput,
    config: Configuration,
    result: CalculationResult,
    customer_name: Optional[str] = None,
    notes: Optional[str] = None,
) -> bytearray:
    """Render a proposal for an already computed result and return the PDF bytes."""
    pdf = ProposalPDF(title)
    pdf.alias_nb_pages()
    pdf.add_page()

    pdf.set_font("Helvetica", "B", 18)
    pdf.cell(0, 12, _latin1(title), align="C", new_x="LMARGIN", new_y="NEXT")
    if customer_name:
        pdf.set_font("Helvetica", "", 11)
        pdf.set_text_color(60, 60, 60)
        pdf.cell(0, 7, _latin1(f"Prepared for {customer_name}"), align="C", new_x="LMARGIN", new_y="NEXT")
    pdf.ln(4)

    _add_section_heading(pdf, "Site")
    _add_rows(pdf, [
        ("City", f"{city.name} ({city.region.value})"),
        ("Roof area", f"{calc_input.roof_area:,.0f} m²"),
        ("Roof orientation", calc_input.orientation.value.replace("-", " ").title()),
        ("Monthly electricity bill", f"{calc_input.bill_amount:,.0f} {CURRENCY_LABEL}"),
    ])

    _add_section_heading(pdf, "Recommended System")
    rows = [
        ("System size", f"{result.system_size_kw:.2f} kWp"),
        ("Panels", f"{result.panel_count} x {config.panel_wattage:.0f} W"),
        ("Annual production", f"{result.annual_production:,} kWh"),
        ("Annual consumption", f"{result.annual_consumption:,} kWh"),
    ]
    if result.roof_limited:
        rows.append(("Note", "Limited by available roof area"))
    _add_rows(pdf, rows)

    _add_section_heading(pdf, "Financial Projection")
    _add_rows(pdf, [
        ("Total cost", f"{result.total_cost_usd:,} USD / {result.total_cost_local:,} {CURRENCY_LABEL}"),
        ("Average monthly savings", f"{result.monthly_savings:,} {CURRENCY_LABEL}"),
        ("Payback period", f"{result.roi_years:.1f} years"),
        ("CO2 offset", f"{result.co2_saved_tons:.2f} t/year"),
    ])

    _add_section_heading(pdf, "Assumptions")
    pdf.set_font("Helvetica", "", 9)
    pdf.set_text_color(80, 80, 80)
    assumptions = [
        f"Exchange rate {config.usd_rate:.2f} {CURRENCY_LABEL}/USD, "
        f"electricity {config.electricity_price:.2f} {CURRENCY_LABEL}/kWh.",
        f"Installed cost {config.system_cost_per_kw:,.0f} USD per kWp.",
        f"System efficiency {SYSTEM_EFFICIENCY:.0%}, {ROOF_AREA_PER_KW:.0f} m² of roof per kWp, "
        f"grid emissions {CO2_KG_PER_KWH} kg CO2/kWh.",
    ]
    for line in assumptions:
        pdf.multi_cell(0, 5, _latin1(line), new_x="LMARGIN", new_y="NEXT")

    if notes:
        pdf.ln(2)
        _add_section_heading(pdf, "Notes")
        pdf.set_font("Helvetica", "", 10)
        pdf.set_text_color(40, 40, 40)
        pdf.multi_cell(0, 5, _latin1(notes))

    return pdf.output()


def _add_section_heading(pdf: FPDF, text: str) -> None:
    pdf.set_font("Helvetica", "B", 13)
    pdf.set_text_color(30, 30, 30)
    pdf.cell(0, 9, text, new_x="LMARGIN", new_y="NEXT")


def _add_rows(pdf: FPDF, rows: list[tuple[str, str]]) -> None:
    """Render label/value pairs as a two-column bordered table."""
    for label, value in rows:
        pdf.set_font("Helvetica", "B", 9)
        pdf.set_fill_color(240, 240, 240)
        pdf.set_text_color(30, 30, 30)
        pdf.cell(_LABEL_WIDTH, 6, _latin1(label), border=1, fill=True)
        pdf.set_font("Helvetica", "", 9)
        pdf.set_text_color(40, 40, 40)
        pdf.cell(0, 6, _latin1(value), border=1, new_x="LMARGIN", new_y="NEXT")
    pdf.ln(3)


def _latin1(text: str) -> str:
    """Reduce text to characters the built-in Helvetica font can encode."""
    out = []
    for ch in text.translate(_LATIN1_FALLBACK):
        if ord(ch) < 256:
            out.append(ch)
            continue
        base = "".join(c for c in unicodedata.normalize("NFKD", ch) if not unicodedata.combining(c))
        out.append(base.encode("latin-1", "replace").decode("latin-1"))
    return "".join(out)
