from functools import cached_property

import click

from analytics.aggregator import (
    aggregate_by_modality,
    modality_chart,
    monthly_volume,
    project_trend,
    radiologist_productivity,
    summarize_kpis,
)
from data.config import DEFAULT_VARIANT, GeneratorConfig, get_variant
from data.generator import generate_records
from data.models import KpiCard, KpiSummary, StudyRecord, TrendPoint

TREND_SIZE = 10
STUDY_LOG_SIZE = 5

# Benchmarks shown under the KPI values
TAT_TARGET_MINUTES = 90
INDUSTRY_DENIAL_RATE = 0.08


class Dashboard:
    """A generated record set plus the views derived from it.

    Records are fixed at construction; each view is computed on first access
    and reused afterwards.
    """

    def __init__(self, records: tuple[StudyRecord, ...], config: GeneratorConfig):
        self.records = tuple(records)
        self.config = config

    @property
    def variant(self) -> str:
        return self.config.name

    @cached_property
    def modality_aggregate(self) -> dict[str, int]:
        return aggregate_by_modality(self.records)

    @cached_property
    def modality_chart(self) -> list[dict]:
        return modality_chart(self.records)

    @cached_property
    def trend(self) -> list[TrendPoint]:
        return project_trend(self.records, TREND_SIZE)

    def trend_for(self, n: int) -> list[TrendPoint]:
        if n == TREND_SIZE:
            return self.trend
        return project_trend(self.records, n)

    @cached_property
    def kpis(self) -> KpiSummary:
        return summarize_kpis(self.records)

    @cached_property
    def kpi_cards(self) -> list[KpiCard]:
        k = self.kpis
        return [
            KpiCard("Avg Report TAT", f"{k.avg_report_tat:.0f} mins", f"Target: <{TAT_TARGET_MINUTES} mins"),
            KpiCard("Modality Utilization", f"{k.avg_utilization:.0f}%", f"{k.study_count} studies"),
            KpiCard("Claims Denial Rate", f"{k.denial_rate:.1%}", f"Industry Avg: {INDUSTRY_DENIAL_RATE:.0%}"),
            KpiCard("False Result Rate", f"{k.false_result_rate:.1%}", "Quality Benchmark"),
            KpiCard("MIPS Compliance", f"{k.compliance_rate:.1%}", f"{k.total_rvu:,.2f} total RVUs"),
        ]

    @cached_property
    def radiologists(self) -> list[dict]:
        return radiologist_productivity(self.records)

    @cached_property
    def monthly_volume(self) -> list[dict]:
        return monthly_volume(self.records)

    @cached_property
    def study_log(self) -> list[dict]:
        return [
            {
                "study_id": r.display_id,
                "modality": r.modality,
                "radiologist": r.radiologist,
                "rvu": f"{r.rvu:.2f}",
                "status": r.claim_status,
                "regulatory": r.regulatory_status,
            }
            for r in self.records[:STUDY_LOG_SIZE]
        ]


def build_dashboard(
    variant: str = DEFAULT_VARIANT,
    count: int | None = None,
    seed: int | None = None,
) -> Dashboard:
    """Generate the record set once and wrap it in a Dashboard."""
    config = get_variant(variant)
    click.echo(f"Generating {config.count if count is None else count} '{config.name}' study records...")
    records = generate_records(config, count=count, seed=seed)
    click.echo(f"  -> {len(records)} records across {len(set(r.modality for r in records))} modalities")
    return Dashboard(records, config)
