"""Tests for variant and site configuration."""

import click
import pytest

from data.config import SITES, VARIANTS, NumericRange, get_site, get_variant


def test_numeric_range_is_half_open():
    r = NumericRange(15, 45)
    assert r.maximum == 60
    assert r.contains(15)
    assert r.contains(59)
    assert not r.contains(60)
    assert not r.contains(14)


def test_analytics_variant_matches_reference_generator():
    config = get_variant("analytics")
    assert config.modalities == ("MRI", "CT", "X-Ray", "Ultrasound", "PET")
    assert config.radiologists == ("Dr. Smith", "Dr. Jones", "Dr. Lee", "Dr. Wong")
    assert config.wait_time == NumericRange(15, 45)
    assert config.report_tat == NumericRange(30, 120)
    assert not config.cyclic_categories


def test_two_variants_cycle_categories():
    assert sum(1 for c in VARIANTS.values() if c.cyclic_categories) == 2


def test_get_variant_unknown():
    with pytest.raises(click.ClickException, match="Unknown variant"):
        get_variant("mammography")


def test_sites():
    assert set(SITES) == {"all", "north", "south"}
    assert get_site("south").name == "South Imaging"
    with pytest.raises(click.ClickException):
        get_site("east")
