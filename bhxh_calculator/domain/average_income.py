"""Slip-factor adjusted average monthly income"""

from typing import List, Optional

from bhxh_calculator.domain.formatting import format_decimal, format_number
from bhxh_calculator.domain.models import (
    AverageDetail,
    AverageResult,
    ContributionPeriod,
    PeriodType,
)
from bhxh_calculator.domain.reference_tables import (
    DEFAULT_BASE_YEAR,
    SlipFactorTable,
    default_reference_tables,
)
from bhxh_calculator.utils.date_utils import months_by_calendar_year


def factor_series_for(period_type: PeriodType) -> PeriodType:
    """Slip-factor series a period is revalued with"""
    return PeriodType.VOLUNTARY if period_type == PeriodType.VOLUNTARY else PeriodType.COMPULSORY


def calc_average(
    periods: List[ContributionPeriod],
    base_year: int = DEFAULT_BASE_YEAR,
    slip_factors: Optional[SlipFactorTable] = None,
) -> AverageResult:
    """
    Average monthly income revalued with slip factors.

    Each non-maternity period is cut into calendar-year buckets; every bucket
    contributes salary x factor(year) x months. The average is the adjusted
    total divided by the month total over all buckets (0.0 when there is no
    non-maternity period).
    """
    if slip_factors is None:
        slip_factors = default_reference_tables().slip_factors

    total_adjusted = 0.0
    total_months = 0
    details = []

    for period in periods:
        if period.type == PeriodType.MATERNITY:
            continue

        series = factor_series_for(period.type)
        for bucket in months_by_calendar_year(
            period.from_month, period.from_year, period.to_month, period.to_year
        ):
            factor = slip_factors.lookup(bucket.year, series, base_year)
            adjusted = period.salary * factor * bucket.months
            total_adjusted += adjusted
            total_months += bucket.months

            details.append(
                AverageDetail(
                    year=bucket.year,
                    months=bucket.months,
                    salary=period.salary,
                    factor=factor,
                    adjusted=adjusted,
                    type=period.type,
                    period_str=f"T{bucket.start_month}/{bucket.year} - T{bucket.end_month}/{bucket.year}",
                    formula=(
                        f"{format_number(period.salary)} × {format_decimal(factor)} × "
                        f"{bucket.months} = {format_number(adjusted)}"
                    ),
                )
            )

    average = total_adjusted / total_months if total_months > 0 else 0.0

    return AverageResult(
        total_adjusted=total_adjusted,
        total_months=total_months,
        average=average,
        details=tuple(details),
        formula=f"{format_number(total_adjusted)} / {total_months} = {format_number(average)}",
    )
