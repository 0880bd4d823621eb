"""Pydantic schemas for API request/response validation"""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from bhxh_calculator.domain.models import ContributionPeriod, PeriodType


class PeriodSchema(BaseModel):
    """One contribution period as sent by the form"""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[Union[int, str]] = Field(None, description="Caller-supplied period identifier")
    type: PeriodType
    from_month: Optional[int] = None
    from_year: Optional[int] = None
    to_month: Optional[int] = None
    to_year: Optional[int] = None
    salary: float = Field(0.0, ge=0, description="Monthly salary/income in VND")
    subject_type: str = Field("", description="Beneficiary class for voluntary periods")
    count_time: Optional[bool] = Field(
        None, description="Whether the period counts toward time; maternity defaults to false"
    )

    def to_domain(self, fallback_id: int) -> ContributionPeriod:
        return ContributionPeriod(
            id=self.id if self.id is not None else fallback_id,
            type=self.type,
            from_month=self.from_month,
            from_year=self.from_year,
            to_month=self.to_month,
            to_year=self.to_year,
            salary=self.salary,
            subject_type=self.subject_type,
            count_time=(
                self.count_time if self.count_time is not None else self.type != PeriodType.MATERNITY
            ),
        )


class CalculationRequest(BaseModel):
    """Request body for POST /v1/calculate"""

    periods: List[PeriodSchema] = Field(..., description="Contribution periods")
    slip_factor_year: Optional[int] = Field(None, description="Slip-factor table base year")


class _ResultModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class TimeDetailSchema(_ResultModel):
    period: str
    months: int
    before_2014: int
    from_2014: int


class TimeSchema(_ResultModel):
    total_months: int
    months_before_2014: int
    months_from_2014: int
    years_before_2014: float
    years_from_2014: float
    total_years: float
    details: List[TimeDetailSchema]
    total_time_text: str
    total_years_text: str


class AverageDetailSchema(_ResultModel):
    year: int
    months: int
    salary: float
    factor: float
    adjusted: float
    type: PeriodType
    period_str: str
    formula: str


class AverageSchema(_ResultModel):
    total_adjusted: float
    total_months: int
    average: float
    details: List[AverageDetailSchema]
    formula: str


class LumpSumSchema(_ResultModel):
    benefit_before_2014: float
    benefit_from_2014: float
    total: float
    formula: str
    years_before_2014: float
    years_from_2014: float


class SupportSubPeriodSchema(_ResultModel):
    period: str
    base_value: float
    months: int
    support_per_month: float
    total_support: float
    formula: str


class PeriodSupportSchema(_ResultModel):
    period: str
    total_support: float
    details: List[SupportSubPeriodSchema]
    subject_type: str
    subject_name: str


class GovSupportSchema(_ResultModel):
    total_support: float
    details: List[PeriodSupportSchema]


class CalculationResponse(_ResultModel):
    """Response for POST /v1/calculate; also the JSON export layout"""

    time: TimeSchema
    average: AverageSchema
    lump_sum: LumpSumSchema
    gov_support: GovSupportSchema
    final_amount: float
    final_amount_text: str
    final_formula: str
    slip_factor_year: int
    periods: List[PeriodSchema]


class SlipFactorRow(BaseModel):
    year: int
    factor: float


class SlipFactorTableResponse(BaseModel):
    """Response for GET /v1/slip-factors/{contribution_type}"""

    type: PeriodType
    base_year: int
    rows: List[SlipFactorRow]


class SlipFactorYearsResponse(BaseModel):
    """Response for GET /v1/slip-factors"""

    base_years: List[int]
    default_base_year: int


class SupportSubPeriodInfo(BaseModel):
    key: str
    start_month: int
    start_year: int
    end_month: int
    end_year: int
    base_value: float


class SubjectRateInfo(BaseModel):
    key: str
    name: str
    rate: float


class SupportRatesResponse(BaseModel):
    """Response for GET /v1/support-rates"""

    contribution_rate: float
    sub_periods: List[SupportSubPeriodInfo]
    subject_rates: List[SubjectRateInfo]
