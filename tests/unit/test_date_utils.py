"""Unit tests for month-resolution date arithmetic"""

import pytest
from bhxh_calculator.utils.date_utils import (
    is_valid_range,
    months_by_calendar_year,
    months_inclusive,
    overlap_months,
    split_at_cutoff,
)

RANGES = [
    (1, 2020, 1, 2020),
    (4, 2019, 6, 2019),
    (6, 2013, 3, 2014),
    (12, 2013, 1, 2014),
    (1, 2014, 12, 2014),
    (3, 1995, 8, 2025),
    (11, 2010, 2, 2013),
]


def test_months_inclusive_single_month():
    """Same start and end month counts as one month"""
    assert months_inclusive(5, 2020, 5, 2020) == 1
    assert months_inclusive(12, 1999, 12, 1999) == 1


def test_months_inclusive_across_years():
    """Inclusive count across a year boundary"""
    assert months_inclusive(4, 2019, 6, 2019) == 3
    assert months_inclusive(11, 2019, 2, 2020) == 4
    assert months_inclusive(1, 2000, 12, 2009) == 120


def test_is_valid_range():
    """End must not precede start at month resolution"""
    assert is_valid_range(4, 2019, 4, 2019) is True
    assert is_valid_range(4, 2019, 3, 2020) is True
    assert is_valid_range(4, 2019, 3, 2019) is False
    assert is_valid_range(1, 2020, 12, 2019) is False


def test_split_entirely_before_cutoff():
    """A period inside 2013 lands wholly in the before bucket"""
    split = split_at_cutoff(1, 2013, 12, 2013)
    assert split.before_months == 12
    assert split.from_months == 0


def test_split_starting_at_cutoff():
    """January 2014 itself belongs to the from bucket"""
    split = split_at_cutoff(1, 2014, 6, 2014)
    assert split.before_months == 0
    assert split.from_months == 6


def test_split_straddling_cutoff():
    """06/2013 - 03/2014 gives 7 months before and 3 from"""
    split = split_at_cutoff(6, 2013, 3, 2014)
    assert split.before_months == 7
    assert split.from_months == 3


@pytest.mark.parametrize("bounds", RANGES)
@pytest.mark.parametrize("cutoff", [(1, 2014), (7, 2016), (1, 1990), (6, 2030), (3, 2019)])
def test_split_preserves_total(bounds, cutoff):
    """before + from equals the inclusive count for any cutoff placement"""
    split = split_at_cutoff(*bounds, cutoff_month=cutoff[0], cutoff_year=cutoff[1])
    assert split.before_months + split.from_months == months_inclusive(*bounds)
    assert split.before_months >= 0
    assert split.from_months >= 0


def test_months_by_calendar_year_clips_edges():
    """First and last years are clipped to the period bounds"""
    buckets = months_by_calendar_year(11, 2018, 2, 2020)

    assert [b.year for b in buckets] == [2018, 2019, 2020]
    assert [b.months for b in buckets] == [2, 12, 2]
    assert (buckets[0].start_month, buckets[0].end_month) == (11, 12)
    assert (buckets[1].start_month, buckets[1].end_month) == (1, 12)
    assert (buckets[2].start_month, buckets[2].end_month) == (1, 2)


def test_months_by_calendar_year_single_year():
    """A period within one year yields one bucket"""
    buckets = months_by_calendar_year(4, 2019, 6, 2019)
    assert len(buckets) == 1
    assert buckets[0].months == 3


@pytest.mark.parametrize("bounds", RANGES)
def test_months_by_calendar_year_sums_to_total(bounds):
    """Bucket months add up to the inclusive count"""
    assert sum(b.months for b in months_by_calendar_year(*bounds)) == months_inclusive(*bounds)


def test_overlap_months():
    """Overlap of inclusive month ranges"""
    support_window = (1, 2018, 12, 2021)

    assert overlap_months((4, 2019, 6, 2019), support_window) == 3
    assert overlap_months((6, 2017, 2, 2018), support_window) == 2
    assert overlap_months((1, 2010, 12, 2030), support_window) == 48
    assert overlap_months((1, 2022, 6, 2022), support_window) == 0
    assert overlap_months((12, 2021, 12, 2021), support_window) == 1

