"""Contribution time aggregation and benefit-year rounding"""

from typing import List

from bhxh_calculator.domain.formatting import format_months_vn, format_period, format_years_vn
from bhxh_calculator.domain.models import ContributionPeriod, TimeDetail, TimeResult
from bhxh_calculator.utils.date_utils import months_inclusive, split_at_cutoff


def months_to_benefit_years(months: int) -> float:
    """
    Convert a month count to benefit years.

    Rounding table for the part below a full year:
    - 0 months: +0
    - 1-6 months: +0.5 year
    - 7-11 months: +1 year

    Example:
        13 months -> 1.5 years, 19 months -> 2 years
    """
    full_years, remaining = divmod(months, 12)

    if remaining == 0:
        extra = 0.0
    elif remaining <= 6:
        extra = 0.5
    else:
        extra = 1.0

    return full_years + extra


def calc_total_time(periods: List[ContributionPeriod]) -> TimeResult:
    """
    Sum contribution months across periods, split at 01/2014.

    Maternity periods without the count flag are skipped. Total, before-2014
    and from-2014 month counts are each rounded to benefit years on their
    own; the lump sum needs the two separately rounded buckets.
    """
    total_months = 0
    months_before = 0
    months_from = 0
    details = []

    for period in periods:
        if not period.counts_toward_time():
            continue

        bounds = (period.from_month, period.from_year, period.to_month, period.to_year)
        months = months_inclusive(*bounds)
        split = split_at_cutoff(*bounds)

        total_months += months
        months_before += split.before_months
        months_from += split.from_months

        details.append(
            TimeDetail(
                period=format_period(*bounds),
                months=months,
                before_2014=split.before_months,
                from_2014=split.from_months,
            )
        )

    return TimeResult(
        total_months=total_months,
        months_before_2014=months_before,
        months_from_2014=months_from,
        years_before_2014=months_to_benefit_years(months_before),
        years_from_2014=months_to_benefit_years(months_from),
        total_years=months_to_benefit_years(total_months),
        details=tuple(details),
        total_time_text=format_months_vn(total_months),
        total_years_text=format_years_vn(months_to_benefit_years(total_months)),
    )
