"""GET /v1/slip-factors, /v1/support-rates - read-only reference data"""

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException

from bhxh_calculator.api.v1.schemas import (
    SlipFactorRow,
    SlipFactorTableResponse,
    SlipFactorYearsResponse,
    SubjectRateInfo,
    SupportRatesResponse,
    SupportSubPeriodInfo,
)
from bhxh_calculator.api.dependencies import get_reference_tables
from bhxh_calculator.domain.models import PeriodType
from bhxh_calculator.domain.reference_tables import ReferenceTables

router = APIRouter()

_TABLE_TYPES = {PeriodType.COMPULSORY.value, PeriodType.VOLUNTARY.value}


@router.get("/slip-factors", response_model=SlipFactorYearsResponse)
def list_slip_factor_years(tables: ReferenceTables = Depends(get_reference_tables)):
    """Base years available for the slip-factor selector"""
    return SlipFactorYearsResponse(
        base_years=tables.slip_factors.base_years(),
        default_base_year=tables.slip_factors.default_base_year,
    )


@router.get("/slip-factors/{contribution_type}", response_model=SlipFactorTableResponse)
def get_slip_factor_table(
    contribution_type: str,
    base_year: Optional[int] = None,
    tables: ReferenceTables = Depends(get_reference_tables),
):
    """
    Slip factors of one contribution type, most recent year first.

    Returns:
        Rows of (year, factor) for the informational table display
    """
    if contribution_type not in _TABLE_TYPES:
        raise HTTPException(status_code=404, detail="Unknown contribution type")

    base_year = base_year or tables.slip_factors.default_base_year
    rows = tables.slip_factors.table_rows(contribution_type, base_year)

    return SlipFactorTableResponse(
        type=PeriodType(contribution_type),
        base_year=base_year,
        rows=[SlipFactorRow(year=year, factor=factor) for year, factor in rows],
    )


@router.get("/support-rates", response_model=SupportRatesResponse)
def get_support_rates(tables: ReferenceTables = Depends(get_reference_tables)):
    """Government support windows and beneficiary rates"""
    rule = tables.gov_support
    return SupportRatesResponse(
        contribution_rate=rule.contribution_rate,
        sub_periods=[
            SupportSubPeriodInfo(
                key=sp.key,
                start_month=sp.start_month,
                start_year=sp.start_year,
                end_month=sp.end_month,
                end_year=sp.end_year,
                base_value=sp.base_value,
            )
            for sp in rule.sub_periods
        ],
        subject_rates=[SubjectRateInfo(key=r.key, name=r.name, rate=r.rate) for r in rule.subject_rates],
    )
