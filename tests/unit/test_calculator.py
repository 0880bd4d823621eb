"""Unit tests for the calculation entry point"""

import logging

import pytest
from bhxh_calculator.domain.calculator import calculate, filter_valid_periods
from bhxh_calculator.domain.exceptions import ValidationError
from bhxh_calculator.domain.models import ContributionPeriod, PeriodType, SubjectType


def test_calculate_sample_scenario(sample_periods):
    """Demonstration data: 12 months from 2014, one voluntary quarter supported"""
    result = calculate(sample_periods, 2026)

    assert result.time.total_months == 12
    assert result.time.months_before_2014 == 0
    assert result.time.months_from_2014 == 12
    assert result.time.years_from_2014 == 1.0

    assert result.average.average == pytest.approx(3_764_500)
    assert result.lump_sum.total == pytest.approx(result.average.average * 1.0 * 2.0)
    assert result.lump_sum.total == pytest.approx(7_529_000)

    assert result.gov_support.total_support == pytest.approx(0.22 * 700_000 * 0.10 * 3)
    assert result.final_amount == pytest.approx(7_529_000 - 46_200)
    assert result.final_amount_text == "7,482,800 đồng"
    assert result.final_formula == "7,529,000 - 46,200 = 7,482,800"
    assert result.slip_factor_year == 2026
    assert len(result.periods) == 4


def test_calculate_rejects_when_no_valid_period():
    """Nothing usable after filtering raises ValidationError"""
    periods = [
        ContributionPeriod(1, PeriodType.COMPULSORY, 6, 2020, 1, 2020, salary=5_000_000),
        ContributionPeriod(2, PeriodType.COMPULSORY, None, 2020, 12, 2020, salary=5_000_000),
    ]
    with pytest.raises(ValidationError, match="Không có giai đoạn hợp lệ"):
        calculate(periods)


def test_calculate_rejects_empty_list():
    """An empty list is a validation error, not an empty result"""
    with pytest.raises(ValidationError):
        calculate([])


def test_invalid_periods_are_excluded(sample_periods):
    """Reversed or incomplete periods drop out silently"""
    broken = [
        ContributionPeriod(10, PeriodType.COMPULSORY, 12, 2024, 1, 2024, salary=50_000_000),
        ContributionPeriod(11, PeriodType.COMPULSORY, 0, 2024, 3, 2024, salary=50_000_000),
        ContributionPeriod(12, PeriodType.COMPULSORY, 13, 2024, 3, 2025, salary=50_000_000),
    ]
    with_broken = calculate(sample_periods + broken, 2026)
    clean = calculate(sample_periods, 2026)

    assert with_broken == clean
    assert [p.id for p in with_broken.periods] == [1, 2, 3, 4]


def test_filter_valid_periods_keeps_order(sample_periods):
    """Valid periods keep their input order"""
    reversed_period = ContributionPeriod(9, PeriodType.VOLUNTARY, 5, 2020, 4, 2020)
    valid = filter_valid_periods([sample_periods[2], reversed_period, sample_periods[0]])
    assert [p.id for p in valid] == [3, 1]


def test_calculate_is_idempotent(sample_periods):
    """Identical inputs give identical results"""
    assert calculate(sample_periods, 2026) == calculate(sample_periods, 2026)


def test_result_is_isolated_from_later_edits(sample_periods):
    """Editing an input period afterwards does not change the result"""
    result = calculate(sample_periods, 2026)
    sample_periods[0].salary = 99_000_000

    assert result.periods[0].salary == 1_000_000


def test_negative_final_amount_is_returned(caplog):
    """Support larger than the lump sum yields a negative payable amount"""
    periods = [
        ContributionPeriod(
            id=1,
            type=PeriodType.VOLUNTARY,
            from_month=1,
            from_year=2018,
            to_month=12,
            to_year=2018,
            salary=0,
            subject_type=SubjectType.POOR_HOUSEHOLD.value,
        )
    ]
    with caplog.at_level(logging.WARNING, logger="bhxh_calculator.domain.calculator"):
        result = calculate(periods, 2026)

    assert result.lump_sum.total == 0.0
    assert result.gov_support.total_support == pytest.approx(554_400)
    assert result.final_amount == pytest.approx(-554_400)
    assert "Government support exceeds lump sum" in caplog.text


def test_pre_2014_career():
    """Years before 2014 use the 1.5 multiplier and older slip factors"""
    periods = [ContributionPeriod(1, PeriodType.COMPULSORY, 1, 2010, 6, 2013, salary=3_000_000)]
    result = calculate(periods, 2026)

    assert result.time.months_before_2014 == 42
    assert result.time.years_before_2014 == 3.5
    assert result.time.years_from_2014 == 0.0

    expected_total = 3_000_000 * 12 * (2.14 + 1.78 + 1.64) + 3_000_000 * 6 * 1.54
    assert result.average.total_adjusted == pytest.approx(expected_total)
    assert result.lump_sum.total == pytest.approx(expected_total / 42 * 3.5 * 1.5)
    assert result.gov_support.total_support == 0.0


def test_maternity_counts_time_but_not_income():
    """Flagged maternity adds months; salary average ignores it"""
    periods = [
        ContributionPeriod(1, PeriodType.COMPULSORY, 1, 2022, 6, 2022, salary=8_000_000),
        ContributionPeriod(2, PeriodType.MATERNITY, 7, 2022, 12, 2022, count_time=True),
    ]
    result = calculate(periods, 2026)

    assert result.time.total_months == 12
    assert result.time.years_from_2014 == 1.0
    assert result.average.total_months == 6
    assert result.average.average == pytest.approx(8_000_000 * 1.07)
    assert result.lump_sum.total == pytest.approx(8_000_000 * 1.07 * 2.0)


def test_periods_outside_year_window_are_excluded(sample_periods):
    """Years outside 1900..2100 mark a period incomplete instead of expanding it"""
    far_future = ContributionPeriod(20, PeriodType.COMPULSORY, 1, 1, 12, 3_000_000, salary=5_000_000)
    too_early = ContributionPeriod(21, PeriodType.COMPULSORY, 1, 1899, 12, 1899, salary=5_000_000)

    with pytest.raises(ValidationError):
        calculate([far_future, too_early])

    assert calculate(sample_periods + [far_future, too_early], 2026) == calculate(sample_periods, 2026)


def test_year_window_edges_are_accepted():
    """1900 and 2100 themselves are inside the window"""
    periods = [ContributionPeriod(1, PeriodType.COMPULSORY, 1, 1900, 12, 2100, salary=1_000_000)]
    assert filter_valid_periods(periods) == periods
