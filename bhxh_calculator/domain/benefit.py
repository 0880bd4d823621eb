"""Lump-sum benefit and government support deduction"""

from typing import List, Optional

from bhxh_calculator.domain.formatting import (
    format_decimal,
    format_number,
    format_period,
    format_years_vn,
)
from bhxh_calculator.domain.models import (
    ContributionPeriod,
    GovSupportResult,
    LumpSumResult,
    PeriodSupport,
    PeriodType,
    SupportSubPeriodDetail,
)
from bhxh_calculator.domain.reference_tables import GovSupportRule, default_reference_tables
from bhxh_calculator.utils.date_utils import overlap_months

MULTIPLIER_BEFORE_2014 = 1.5
MULTIPLIER_FROM_2014 = 2.0


def calc_lump_sum(average: float, years_before_2014: float, years_from_2014: float) -> LumpSumResult:
    """
    Lump sum = average x years before 2014 x 1.5 + average x years from 2014 x 2.

    Year values are the rounded benefit years of each bucket.
    """
    benefit_before = average * years_before_2014 * MULTIPLIER_BEFORE_2014
    benefit_from = average * years_from_2014 * MULTIPLIER_FROM_2014
    total = benefit_before + benefit_from

    parts = []
    if years_before_2014 > 0:
        parts.append(
            f"({format_number(average)} × {format_years_vn(years_before_2014)} × "
            f"{format_decimal(MULTIPLIER_BEFORE_2014)} = {format_number(benefit_before)})"
        )
    if years_from_2014 > 0:
        parts.append(
            f"({format_number(average)} × {format_years_vn(years_from_2014)} × "
            f"{format_decimal(MULTIPLIER_FROM_2014)} = {format_number(benefit_from)})"
        )

    formula = " + ".join(parts)
    if len(parts) > 1:
        formula += f" = {format_number(total)}"

    return LumpSumResult(
        benefit_before_2014=benefit_before,
        benefit_from_2014=benefit_from,
        total=total,
        formula=formula,
        years_before_2014=years_before_2014,
        years_from_2014=years_from_2014,
    )


def calc_period_support(period: ContributionPeriod, rule: GovSupportRule) -> PeriodSupport:
    """Support accrued by one voluntary period across all support sub-periods"""
    bounds = (period.from_month, period.from_year, period.to_month, period.to_year)
    rate = rule.subsidy_rate(period.subject_type)
    details = []
    total = 0.0

    for sub_period in rule.sub_periods:
        months = overlap_months(bounds, sub_period.as_range())
        if months == 0:
            continue

        per_month = rule.support_per_month(sub_period, period.subject_type)
        support = per_month * months
        total += support
        details.append(
            SupportSubPeriodDetail(
                period=sub_period.key,
                base_value=sub_period.base_value,
                months=months,
                support_per_month=per_month,
                total_support=support,
                formula=(
                    f"{format_decimal(rule.contribution_rate)} × {format_number(sub_period.base_value)} × "
                    f"{format_decimal(round(rate * 100, 10))}% × {months} = {format_number(support)}"
                ),
            )
        )

    return PeriodSupport(
        period=format_period(*bounds),
        total_support=total,
        details=tuple(details),
        subject_type=period.subject_type,
        subject_name=rule.subject_name(period.subject_type),
    )


def calc_total_gov_support(
    periods: List[ContributionPeriod], rule: Optional[GovSupportRule] = None
) -> GovSupportResult:
    """
    Government support paid toward voluntary contributions.

    Only voluntary periods with a subject class take part. Periods whose
    support comes to zero (unrecognized class, no overlap) are left out of
    the breakdown.
    """
    if rule is None:
        rule = default_reference_tables().gov_support

    total = 0.0
    details = []

    for period in periods:
        if period.type != PeriodType.VOLUNTARY or not period.subject_type:
            continue

        support = calc_period_support(period, rule)
        total += support.total_support
        if support.total_support > 0:
            details.append(support)

    return GovSupportResult(total_support=total, details=tuple(details))
