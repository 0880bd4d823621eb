"""Lump-sum calculation engine - single entry point"""

import logging
from dataclasses import replace
from typing import Iterable, List, Optional

from bhxh_calculator.domain.average_income import calc_average
from bhxh_calculator.domain.benefit import calc_lump_sum, calc_total_gov_support
from bhxh_calculator.domain.contribution_time import calc_total_time
from bhxh_calculator.domain.exceptions import ValidationError
from bhxh_calculator.domain.formatting import format_currency, format_number
from bhxh_calculator.domain.models import CalculationResult, ContributionPeriod
from bhxh_calculator.domain.reference_tables import (
    DEFAULT_BASE_YEAR,
    ReferenceTables,
    default_reference_tables,
)
from bhxh_calculator.utils.date_utils import is_valid_range

logger = logging.getLogger(__name__)

NO_VALID_PERIODS_MESSAGE = "Không có giai đoạn hợp lệ"


def filter_valid_periods(periods: Iterable[ContributionPeriod]) -> List[ContributionPeriod]:
    """Keep periods with complete dates whose end is not before their start"""
    valid = []
    for period in periods:
        if period.is_complete() and is_valid_range(
            period.from_month, period.from_year, period.to_month, period.to_year
        ):
            valid.append(period)
        else:
            logger.debug("Excluding invalid period", extra={"period_id": period.id})
    return valid


def calculate(
    periods: Iterable[ContributionPeriod],
    base_year: int = DEFAULT_BASE_YEAR,
    tables: Optional[ReferenceTables] = None,
) -> CalculationResult:
    """
    Main entry point: compute the lump-sum benefit for a list of periods.

    Flow:
    1. Drop incomplete or reversed periods (ValidationError when none remain)
    2. Total contribution time, split at 01/2014
    3. Slip-factor adjusted average income
    4. Lump sum from the rounded years
    5. Government support for voluntary periods
    6. Final amount = lump sum - support (not clamped at zero)
    """
    if tables is None:
        tables = default_reference_tables()

    # Snapshot so later edits by the caller cannot leak into the result
    valid_periods = [replace(p) for p in filter_valid_periods(periods)]
    if not valid_periods:
        raise ValidationError(NO_VALID_PERIODS_MESSAGE)

    time_result = calc_total_time(valid_periods)
    average_result = calc_average(valid_periods, base_year, tables.slip_factors)
    lump_sum_result = calc_lump_sum(
        average_result.average,
        time_result.years_before_2014,
        time_result.years_from_2014,
    )
    support_result = calc_total_gov_support(valid_periods, tables.gov_support)

    final_amount = lump_sum_result.total - support_result.total_support
    if final_amount < 0:
        logger.warning(
            "Government support exceeds lump sum",
            extra={
                "lump_sum": lump_sum_result.total,
                "total_support": support_result.total_support,
            },
        )

    return CalculationResult(
        time=time_result,
        average=average_result,
        lump_sum=lump_sum_result,
        gov_support=support_result,
        final_amount=final_amount,
        final_amount_text=format_currency(final_amount),
        final_formula=(
            f"{format_number(lump_sum_result.total)} - "
            f"{format_number(support_result.total_support)} = {format_number(final_amount)}"
        ),
        slip_factor_year=base_year,
        periods=tuple(valid_periods),
    )
