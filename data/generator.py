import math
import random
from datetime import date

from data.config import GeneratorConfig, NumericRange
from data.models import QualityFlag, StudyRecord

STUDY_ID_OFFSET = 1000


def generate_records(
    config: GeneratorConfig,
    count: int | None = None,
    seed: int | None = None,
    rng: random.Random | None = None,
) -> tuple[StudyRecord, ...]:
    """Generate a fixed-size set of synthetic study records.

    Category fields either cycle through the configured lists by index or are
    drawn at random, depending on ``config.cyclic_categories``. Numeric and
    boolean fields are always random. Pass ``seed`` or ``rng`` for repeatable
    output.
    """
    if count is None:
        count = config.count
    if count < 0:
        raise ValueError(f"Record count must be non-negative, got {count}")

    if rng is None:
        rng = random.Random(seed)

    return tuple(_generate_record(config, i, rng) for i in range(count))


def _generate_record(config: GeneratorConfig, index: int, rng: random.Random) -> StudyRecord:
    def pick(values: tuple[str, ...]) -> str:
        if config.cyclic_categories:
            return values[index % len(values)]
        return rng.choice(values)

    false_positive = rng.random() < config.false_positive_rate
    return StudyRecord(
        study_id=f"RAD-{STUDY_ID_OFFSET + index}",
        study_date=date(config.start_year, index % 12 + 1, 1),
        modality=pick(config.modalities),
        radiologist=pick(config.radiologists),
        referral_source=pick(config.referral_sources),
        wait_time=_draw_int(config.wait_time, rng),
        report_tat=_draw_int(config.report_tat, rng),
        utilization=_draw_int(config.utilization, rng),
        rvu=_draw_decimal(config.rvu, rng),
        denied=rng.random() < config.denial_rate,
        is_compliant=not rng.random() < config.noncompliance_rate,
        quality_flag=QualityFlag.FALSE_POSITIVE if false_positive else QualityFlag.ACCURATE,
    )


def _draw_int(bounds: NumericRange, rng: random.Random) -> int:
    return int(bounds.minimum) + math.floor(rng.random() * bounds.span)


def _draw_decimal(bounds: NumericRange, rng: random.Random, places: int = 2) -> float:
    # Truncate rather than round so the value never reaches the upper bound
    scale = 10 ** places
    return math.floor((bounds.minimum + rng.random() * bounds.span) * scale) / scale
