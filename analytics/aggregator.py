from collections.abc import Callable, Sequence

import polars as pl

from data.models import KpiSummary, SiteProfile, StudyRecord, TrendPoint

# Column layout for record frames; keeps empty inputs typed
FRAME_SCHEMA = {
    "study_id": pl.Utf8,
    "study_date": pl.Date,
    "modality": pl.Utf8,
    "radiologist": pl.Utf8,
    "referral_source": pl.Utf8,
    "wait_time": pl.Int64,
    "report_tat": pl.Int64,
    "utilization": pl.Int64,
    "rvu": pl.Float64,
    "denied": pl.Boolean,
    "is_compliant": pl.Boolean,
    "false_positive": pl.Boolean,
}


def is_denied(record: StudyRecord) -> bool:
    return record.denied


def is_compliant(record: StudyRecord) -> bool:
    return record.is_compliant


def is_false_positive(record: StudyRecord) -> bool:
    return record.is_false_positive


def records_to_frame(records: Sequence[StudyRecord]) -> pl.DataFrame:
    """Flatten study records into a Polars DataFrame."""
    rows = [
        {
            "study_id": r.study_id,
            "study_date": r.study_date,
            "modality": r.modality,
            "radiologist": r.radiologist,
            "referral_source": r.referral_source,
            "wait_time": r.wait_time,
            "report_tat": r.report_tat,
            "utilization": r.utilization,
            "rvu": r.rvu,
            "denied": r.denied,
            "is_compliant": r.is_compliant,
            "false_positive": r.is_false_positive,
        }
        for r in records
    ]
    return pl.DataFrame(rows, schema=FRAME_SCHEMA)


def aggregate_by_modality(records: Sequence[StudyRecord]) -> dict[str, int]:
    """Count studies per modality. Empty input gives an empty mapping."""
    counts = (
        records_to_frame(records)
        .group_by("modality")
        .agg(pl.len().alias("count"))
    )
    return {row["modality"]: row["count"] for row in counts.iter_rows(named=True)}


def modality_chart(records: Sequence[StudyRecord]) -> list[dict]:
    """Modality counts as bar chart rows, busiest modality first."""
    rows = [{"name": name, "value": count} for name, count in aggregate_by_modality(records).items()]
    return sorted(rows, key=lambda row: (-row["value"], row["name"]))


def project_trend(records: Sequence[StudyRecord], n: int) -> list[TrendPoint]:
    """Project the first ``n`` records, in collection order, onto trend points.

    Asking for more points than there are records returns every record.
    """
    head = list(records)[:max(n, 0)]
    return [
        TrendPoint(label=f"Day {i}", wait_time=r.wait_time, report_tat=r.report_tat)
        for i, r in enumerate(head, 1)
    ]


def compute_rate(records: Sequence[StudyRecord], predicate: Callable[[StudyRecord], bool]) -> float:
    """Fraction of records matching ``predicate``; 0.0 for an empty input."""
    if not records:
        return 0.0
    matched = sum(1 for r in records if predicate(r))
    return matched / len(records)


def summarize_kpis(records: Sequence[StudyRecord]) -> KpiSummary:
    """Derive the KPI card figures from the records themselves."""
    if not records:
        return KpiSummary()

    df = records_to_frame(records)
    return KpiSummary(
        study_count=df.height,
        avg_report_tat=round(df["report_tat"].mean(), 1),
        avg_wait_time=round(df["wait_time"].mean(), 1),
        avg_utilization=round(df["utilization"].mean(), 1),
        total_rvu=round(df["rvu"].sum(), 2),
        denial_rate=compute_rate(records, is_denied),
        compliance_rate=compute_rate(records, is_compliant),
        false_result_rate=compute_rate(records, is_false_positive),
    )


def radiologist_productivity(records: Sequence[StudyRecord]) -> list[dict]:
    """Per-radiologist volume, RVUs, turnaround and denials, highest RVU first."""
    stats = (
        records_to_frame(records)
        .group_by("radiologist")
        .agg([
            pl.len().alias("studies"),
            pl.col("rvu").sum().round(2).alias("total_rvu"),
            pl.col("report_tat").mean().round(1).alias("avg_report_tat"),
            pl.col("denied").cast(pl.Int64).sum().alias("denials"),
        ])
        .sort(["total_rvu", "radiologist"], descending=[True, False])
    )
    return stats.to_dicts()


def monthly_volume(records: Sequence[StudyRecord]) -> list[dict]:
    """Study count and mean report TAT per calendar month."""
    monthly = (
        records_to_frame(records)
        .with_columns(pl.col("study_date").dt.truncate("1mo").alias("month"))
        .group_by("month")
        .agg([
            pl.len().alias("studies"),
            pl.col("report_tat").mean().round(1).alias("avg_report_tat"),
        ])
        .sort("month")
    )

    return [
        {
            "month": str(row["month"]),
            "studies": row["studies"],
            "avg_report_tat": row["avg_report_tat"],
        }
        for row in monthly.iter_rows(named=True)
    ]


def throughput_curve(site: SiteProfile) -> list[dict]:
    """Weekly throughput points for a site, labelled W1, W2, ..."""
    return [
        {"week": f"W{i}", "studies": value}
        for i, value in enumerate(site.weekly_throughput, 1)
    ]
