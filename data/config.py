from dataclasses import dataclass

import click

from data.models import SiteProfile

MODALITIES = ("MRI", "CT", "X-Ray", "Ultrasound", "PET")
RADIOLOGISTS = ("Dr. Smith", "Dr. Jones", "Dr. Lee", "Dr. Wong")
REFERRAL_SOURCES = ("Emergency Department", "Primary Care", "Oncology", "Orthopedics")

DEFAULT_VARIANT = "analytics"


@dataclass(frozen=True)
class NumericRange:
    """Half-open range [minimum, minimum + span)."""
    minimum: float
    span: float

    @property
    def maximum(self) -> float:
        return self.minimum + self.span

    def contains(self, value: float) -> bool:
        return self.minimum <= value < self.maximum


@dataclass(frozen=True)
class GeneratorConfig:
    """Category lists, numeric ranges and rates for one dashboard variant."""
    name: str
    count: int
    modalities: tuple[str, ...] = MODALITIES
    radiologists: tuple[str, ...] = RADIOLOGISTS
    referral_sources: tuple[str, ...] = REFERRAL_SOURCES
    wait_time: NumericRange = NumericRange(15, 45)
    report_tat: NumericRange = NumericRange(30, 120)
    utilization: NumericRange = NumericRange(60, 40)
    rvu: NumericRange = NumericRange(1.0, 5.0)
    false_positive_rate: float = 0.05
    denial_rate: float = 0.08
    noncompliance_rate: float = 0.10
    # Cycle categories by record index instead of drawing them at random
    cyclic_categories: bool = False
    start_year: int = 2023


VARIANTS: dict[str, GeneratorConfig] = {
    "analytics": GeneratorConfig(name="analytics", count=120),
    "operations": GeneratorConfig(
        name="operations",
        count=100,
        modalities=("MRI", "CT", "X-Ray", "Ultrasound"),
        wait_time=NumericRange(10, 50),
        report_tat=NumericRange(20, 100),
        utilization=NumericRange(55, 45),
        false_positive_rate=0.03,
        denial_rate=0.06,
        noncompliance_rate=0.05,
        cyclic_categories=True,
    ),
    "quality": GeneratorConfig(
        name="quality",
        count=125,
        radiologists=("Dr. Smith", "Dr. Jones", "Dr. Lee", "Dr. Wong", "Dr. Patel"),
        wait_time=NumericRange(15, 40),
        report_tat=NumericRange(30, 90),
        rvu=NumericRange(0.5, 4.5),
        false_positive_rate=0.08,
        denial_rate=0.04,
        noncompliance_rate=0.07,
        cyclic_categories=True,
        start_year=2024,
    ),
}

SITES: dict[str, SiteProfile] = {
    "all": SiteProfile(
        key="all", name="Enterprise", volume=4120, avg_tat_hours=42.5,
        collection_rate=0.942, weekly_throughput=(45, 52, 48, 70, 65, 90),
        color="#3b82f6",
    ),
    "north": SiteProfile(
        key="north", name="North Clinic", volume=1850, avg_tat_hours=38.2,
        collection_rate=0.961, weekly_throughput=(30, 35, 32, 45, 40, 55),
        color="#10b981",
    ),
    "south": SiteProfile(
        key="south", name="South Imaging", volume=1240, avg_tat_hours=51.8,
        collection_rate=0.915, weekly_throughput=(20, 25, 22, 30, 28, 40),
        color="#ef4444",
    ),
}


def get_variant(name: str) -> GeneratorConfig:
    """Look up a dashboard variant by name."""
    try:
        return VARIANTS[name]
    except KeyError:
        raise click.ClickException(
            f"Unknown variant '{name}'. Choose one of: {', '.join(VARIANTS)}"
        ) from None


def get_site(key: str) -> SiteProfile:
    """Look up a site profile by its selector key."""
    if key not in SITES:
        raise click.ClickException(
            f"Unknown site '{key}'. Choose one of: {', '.join(SITES)}"
        )
    return SITES[key]
