"""Domain models - pure Python dataclasses for contribution periods and results"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

# Outside this window a period is treated as incomplete
MIN_PERIOD_YEAR = 1900
MAX_PERIOD_YEAR = 2100


class PeriodType(str, Enum):
    """Kind of insurance participation"""

    COMPULSORY = "compulsory"
    VOLUNTARY = "voluntary"
    MATERNITY = "maternity"


class SubjectType(str, Enum):
    """Beneficiary class used for the voluntary-contribution support rate"""

    POOR_HOUSEHOLD = "ho_ngheo"
    NEAR_POOR_HOUSEHOLD = "ho_can_ngheo"
    OTHER = "doi_tuong_khac"


@dataclass
class ContributionPeriod:
    """One user-declared span of insurance participation"""

    id: Union[int, str]
    type: PeriodType
    from_month: Optional[int]
    from_year: Optional[int]
    to_month: Optional[int]
    to_year: Optional[int]
    salary: float = 0.0  # ignored for maternity
    subject_type: str = ""  # only read for voluntary periods
    count_time: bool = True  # only read for maternity periods

    def is_complete(self) -> bool:
        """All four date fields populated, months in 1..12, years in the supported window"""
        if not (self.from_month and self.from_year and self.to_month and self.to_year):
            return False
        if not (1 <= self.from_month <= 12 and 1 <= self.to_month <= 12):
            return False
        return MIN_PERIOD_YEAR <= self.from_year and self.to_year <= MAX_PERIOD_YEAR

    def counts_toward_time(self) -> bool:
        return self.type != PeriodType.MATERNITY or self.count_time


@dataclass(frozen=True)
class TimeDetail:
    """Per-period row of the contribution-time breakdown"""

    period: str
    months: int
    before_2014: int
    from_2014: int


@dataclass(frozen=True)
class TimeResult:
    """Total contribution time, split at 01/2014 and rounded to benefit years"""

    total_months: int
    months_before_2014: int
    months_from_2014: int
    years_before_2014: float
    years_from_2014: float
    total_years: float
    details: Tuple[TimeDetail, ...]
    total_time_text: str
    total_years_text: str


@dataclass(frozen=True)
class AverageDetail:
    """One period x calendar-year bucket of the adjusted income"""

    year: int
    months: int
    salary: float
    factor: float
    adjusted: float
    type: PeriodType
    period_str: str
    formula: str


@dataclass(frozen=True)
class AverageResult:
    """Slip-factor adjusted average monthly income"""

    total_adjusted: float
    total_months: int
    average: float
    details: Tuple[AverageDetail, ...]
    formula: str


@dataclass(frozen=True)
class LumpSumResult:
    """Lump-sum benefit before the government support deduction"""

    benefit_before_2014: float
    benefit_from_2014: float
    total: float
    formula: str
    years_before_2014: float
    years_from_2014: float


@dataclass(frozen=True)
class SupportSubPeriodDetail:
    """Support accrued by one period inside one support sub-period"""

    period: str
    base_value: float
    months: int
    support_per_month: float
    total_support: float
    formula: str


@dataclass(frozen=True)
class PeriodSupport:
    """Government support attributed to one voluntary period"""

    period: str
    total_support: float
    details: Tuple[SupportSubPeriodDetail, ...]
    subject_type: str
    subject_name: str


@dataclass(frozen=True)
class GovSupportResult:
    """Total government support to deduct from the lump sum"""

    total_support: float
    details: Tuple[PeriodSupport, ...]


@dataclass(frozen=True)
class CalculationResult:
    """Output of a full lump-sum calculation"""

    time: TimeResult
    average: AverageResult
    lump_sum: LumpSumResult
    gov_support: GovSupportResult
    final_amount: float
    final_amount_text: str
    final_formula: str
    slip_factor_year: int
    periods: Tuple[ContributionPeriod, ...]
