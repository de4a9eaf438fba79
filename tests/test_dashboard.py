"""Tests for the dashboard builder."""

import click
import pytest

from dashboard.builder import STUDY_LOG_SIZE, TREND_SIZE, Dashboard, build_dashboard
from data.config import VARIANTS


def test_build_dashboard_returns_dashboard():
    dashboard = build_dashboard("analytics", seed=5)
    assert isinstance(dashboard, Dashboard)
    assert dashboard.variant == "analytics"
    assert len(dashboard.records) == 120


def test_build_dashboard_count_and_seed():
    a = build_dashboard("operations", count=12, seed=8)
    b = build_dashboard("operations", count=12, seed=8)
    assert len(a.records) == 12
    assert a.records == b.records


def test_build_dashboard_unknown_variant():
    with pytest.raises(click.ClickException):
        build_dashboard("nonexistent")


def test_views_are_memoized(dashboard: Dashboard):
    assert dashboard.modality_aggregate is dashboard.modality_aggregate
    assert dashboard.trend is dashboard.trend
    assert dashboard.kpis is dashboard.kpis
    assert dashboard.trend_for(TREND_SIZE) is dashboard.trend


def test_trend_uses_first_records(dashboard: Dashboard):
    assert len(dashboard.trend) == TREND_SIZE
    assert dashboard.trend[0].report_tat == dashboard.records[0].report_tat
    assert len(dashboard.trend_for(3)) == 3


def test_modality_aggregate_matches_records(dashboard: Dashboard):
    assert sum(dashboard.modality_aggregate.values()) == len(dashboard.records)


def test_kpi_cards_derived_from_records(four_records):
    dashboard = Dashboard(four_records, VARIANTS["analytics"])
    cards = {card.title: card for card in dashboard.kpi_cards}
    assert cards["Claims Denial Rate"].value == "25.0%"
    assert cards["Claims Denial Rate"].sub == "Industry Avg: 8%"
    assert cards["False Result Rate"].value == "25.0%"
    assert cards["MIPS Compliance"].value == "75.0%"
    assert cards["Avg Report TAT"].value == "62 mins"
    assert cards["Avg Report TAT"].sub == "Target: <90 mins"


def test_study_log_rows(dashboard: Dashboard):
    log = dashboard.study_log
    assert len(log) == STUDY_LOG_SIZE
    assert log[0]["study_id"] == "#RAD-1000"
    assert log[0]["status"] in {"Paid", "Denied"}
    assert log[0]["regulatory"] in {"MIPS Compliant", "Review Required"}


def test_empty_dashboard():
    dashboard = Dashboard((), VARIANTS["quality"])
    assert dashboard.modality_aggregate == {}
    assert dashboard.trend == []
    assert dashboard.study_log == []
    assert dashboard.radiologists == []
    assert dashboard.kpis.denial_rate == 0.0
    assert len(dashboard.kpi_cards) == 5
