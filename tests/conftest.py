"""Shared fixtures: seeded record sets and a small hand-built one."""

from datetime import date

import pytest

from dashboard.builder import Dashboard
from data.config import VARIANTS
from data.generator import generate_records
from data.models import QualityFlag, StudyRecord

SEED = 1234


def make_record(index: int, modality: str, radiologist: str = "Dr. Smith", **overrides) -> StudyRecord:
    fields = {
        "study_id": f"RAD-{1000 + index}",
        "study_date": date(2023, index % 12 + 1, 1),
        "modality": modality,
        "radiologist": radiologist,
        "wait_time": 20 + index,
        "report_tat": 60 + index,
        "rvu": 2.5,
        "utilization": 80,
    }
    fields.update(overrides)
    return StudyRecord(**fields)


@pytest.fixture
def four_records() -> list[StudyRecord]:
    """MRI, CT, MRI, X-Ray with one denial, one non-compliant, one false positive."""
    return [
        make_record(0, "MRI", "Dr. Smith", denied=True, rvu=3.0),
        make_record(1, "CT", "Dr. Jones", is_compliant=False, rvu=1.5),
        make_record(2, "MRI", "Dr. Smith", quality_flag=QualityFlag.FALSE_POSITIVE, rvu=4.0),
        make_record(3, "X-Ray", "Dr. Lee", rvu=1.25),
    ]


@pytest.fixture
def analytics_records() -> tuple[StudyRecord, ...]:
    return generate_records(VARIANTS["analytics"], seed=SEED)


@pytest.fixture
def dashboard(analytics_records) -> Dashboard:
    return Dashboard(analytics_records, VARIANTS["analytics"])
