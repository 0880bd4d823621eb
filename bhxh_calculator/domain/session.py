"""Caller-owned working set of contribution periods"""

from dataclasses import fields, replace
from datetime import date
from typing import Dict, List, Optional, Union

from bhxh_calculator.domain.calculator import calculate
from bhxh_calculator.domain.exceptions import PeriodNotFoundError
from bhxh_calculator.domain.models import (
    CalculationResult,
    ContributionPeriod,
    PeriodType,
    SubjectType,
)
from bhxh_calculator.domain.reference_tables import DEFAULT_BASE_YEAR, ReferenceTables

PeriodId = Union[int, str]

_EDITABLE_FIELDS = {f.name for f in fields(ContributionPeriod)} - {"id"}


class PeriodSession:
    """
    Editable list of periods with its own id sequence.

    A session belongs to one user-facing form; nothing here is process-wide.
    """

    def __init__(self, tables: Optional[ReferenceTables] = None):
        self._tables = tables
        self._periods: Dict[PeriodId, ContributionPeriod] = {}
        self._last_id = 0

    @property
    def periods(self) -> List[ContributionPeriod]:
        return [replace(p) for p in self._periods.values()]

    def _next_id(self) -> int:
        self._last_id += 1
        return self._last_id

    def add_period(self, period_type: PeriodType, today: Optional[date] = None) -> ContributionPeriod:
        """New period spanning January - December of the current year"""
        period_type = PeriodType(period_type)
        year = (today or date.today()).year
        period = ContributionPeriod(
            id=self._next_id(),
            type=period_type,
            from_month=1,
            from_year=year,
            to_month=12,
            to_year=year,
            salary=0.0,
            subject_type=SubjectType.OTHER.value,
            count_time=period_type != PeriodType.MATERNITY,
        )
        self._periods[period.id] = period
        return replace(period)

    def get(self, period_id: PeriodId) -> ContributionPeriod:
        if period_id not in self._periods:
            raise PeriodNotFoundError(f"Period {period_id} not found")
        return replace(self._periods[period_id])

    def update_period(self, period_id: PeriodId, **changes) -> ContributionPeriod:
        if period_id not in self._periods:
            raise PeriodNotFoundError(f"Period {period_id} not found")

        unknown = set(changes) - _EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown period fields: {', '.join(sorted(unknown))}")

        if "type" in changes:
            changes["type"] = PeriodType(changes["type"])

        updated = replace(self._periods[period_id], **changes)
        self._periods[period_id] = updated
        return replace(updated)

    def remove_period(self, period_id: PeriodId) -> None:
        if self._periods.pop(period_id, None) is None:
            raise PeriodNotFoundError(f"Period {period_id} not found")

    def seed_sample_data(self) -> List[ContributionPeriod]:
        """Replace the working set with the four demonstration periods"""
        samples = [
            (PeriodType.VOLUNTARY, 4, 2019, 6, 2019, 1_000_000, SubjectType.OTHER.value),
            (PeriodType.COMPULSORY, 4, 2024, 6, 2024, 4_456_000, ""),
            (PeriodType.COMPULSORY, 7, 2024, 9, 2024, 4_706_000, ""),
            (PeriodType.COMPULSORY, 10, 2024, 12, 2024, 4_736_000, ""),
        ]
        self._periods = {}
        for period_type, from_m, from_y, to_m, to_y, salary, subject in samples:
            period = ContributionPeriod(
                id=self._next_id(),
                type=period_type,
                from_month=from_m,
                from_year=from_y,
                to_month=to_m,
                to_year=to_y,
                salary=float(salary),
                subject_type=subject,
                count_time=True,
            )
            self._periods[period.id] = period
        return self.periods

    def calculate(self, base_year: int = DEFAULT_BASE_YEAR) -> CalculationResult:
        return calculate(list(self._periods.values()), base_year, self._tables)
