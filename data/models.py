from dataclasses import dataclass, field
from datetime import date
from enum import Enum


class QualityFlag(Enum):
    ACCURATE = "Accurate"
    FALSE_POSITIVE = "FalsePositive"


@dataclass(frozen=True)
class StudyRecord:
    """A single synthetic radiology study."""
    study_id: str
    study_date: date
    modality: str
    radiologist: str
    wait_time: int  # minutes
    report_tat: int  # minutes
    rvu: float
    referral_source: str = ""
    utilization: int = 0  # percent
    denied: bool = False
    is_compliant: bool = True
    quality_flag: QualityFlag = QualityFlag.ACCURATE

    @property
    def display_id(self) -> str:
        return f"#{self.study_id}"

    @property
    def is_false_positive(self) -> bool:
        return self.quality_flag is QualityFlag.FALSE_POSITIVE

    @property
    def claim_status(self) -> str:
        return "Denied" if self.denied else "Paid"

    @property
    def regulatory_status(self) -> str:
        return "MIPS Compliant" if self.is_compliant else "Review Required"


@dataclass(frozen=True)
class TrendPoint:
    """One point on the TAT vs wait time chart."""
    label: str
    wait_time: int
    report_tat: int


@dataclass
class KpiSummary:
    """Headline numbers derived from a record set."""
    study_count: int = 0
    avg_report_tat: float = 0.0
    avg_wait_time: float = 0.0
    avg_utilization: float = 0.0
    total_rvu: float = 0.0
    denial_rate: float = 0.0  # 0.0 to 1.0
    compliance_rate: float = 0.0
    false_result_rate: float = 0.0


@dataclass(frozen=True)
class KpiCard:
    title: str
    value: str
    sub: str = ""


@dataclass(frozen=True)
class SiteProfile:
    """Static figures for one imaging site."""
    key: str
    name: str
    volume: int
    avg_tat_hours: float
    collection_rate: float  # 0.0 to 1.0
    weekly_throughput: tuple[int, ...] = field(default_factory=tuple)
    color: str = "#3b82f6"
