"""Tests for PDF report generation."""

from pathlib import Path

from dashboard.builder import Dashboard
from data.config import VARIANTS
from reports.pdf import generate_dashboard_pdf


def test_generate_pdf_creates_file(dashboard: Dashboard, tmp_path: Path):
    pdf_path = generate_dashboard_pdf(dashboard, output_dir=tmp_path)
    assert pdf_path.exists()
    assert pdf_path.suffix == ".pdf"
    assert pdf_path.name.startswith("dashboard_analytics_")
    assert pdf_path.stat().st_size > 0


def test_generate_pdf_small_dashboard(four_records, tmp_path: Path):
    dashboard = Dashboard(four_records, VARIANTS["operations"])
    pdf_path = generate_dashboard_pdf(dashboard, output_dir=tmp_path)
    assert pdf_path.exists()


def test_generate_pdf_empty_dashboard(tmp_path: Path):
    """PDF generation should work even with no records."""
    dashboard = Dashboard((), VARIANTS["quality"])
    pdf_path = generate_dashboard_pdf(dashboard, output_dir=tmp_path / "nested")
    assert pdf_path.exists()
    assert pdf_path.stat().st_size > 0
