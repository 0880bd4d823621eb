"""Reference tables: slip factors and voluntary-contribution government support"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from bhxh_calculator.domain.models import PeriodType, SubjectType

DEFAULT_BASE_YEAR = 2026
VOLUNTARY_CONTRIBUTION_RATE = 0.22
UNKNOWN_SUBJECT_NAME = "Không xác định"

# base year -> contribution type -> contribution year -> factor
DEFAULT_SLIP_FACTORS: Dict[int, Dict[str, Dict[int, float]]] = {
    2026: {
        PeriodType.COMPULSORY.value: {
            1995: 5.01, 1996: 4.72, 1997: 4.57, 1998: 4.23, 1999: 4.05,
            2000: 4.18, 2001: 4.19, 2002: 4.04, 2003: 3.92, 2004: 3.64,
            2005: 3.38, 2006: 3.14, 2007: 2.91, 2008: 2.49, 2009: 2.32,
            2010: 2.14, 2011: 1.78, 2012: 1.64, 2013: 1.54, 2014: 1.47,
            2015: 1.47, 2016: 1.44, 2017: 1.39, 2018: 1.34, 2019: 1.16,
            2020: 1.12, 2021: 1.10, 2022: 1.07, 2023: 1.04, 2024: 1.00, 2025: 1.00,
        },
        PeriodType.VOLUNTARY.value: {
            2008: 2.49, 2009: 2.32, 2010: 2.14, 2011: 1.78, 2012: 1.64,
            2013: 1.54, 2014: 1.47, 2015: 1.47, 2016: 1.44, 2017: 1.39,
            2018: 1.34, 2019: 1.16, 2020: 1.12, 2021: 1.10, 2022: 1.07,
            2023: 1.04, 2024: 1.00, 2025: 1.00,
        },
    },
}


@dataclass(frozen=True)
class SupportSubPeriod:
    """Calendar window with a fixed reference base value for support"""

    key: str
    start_month: int
    start_year: int
    end_month: int
    end_year: int
    base_value: float

    def as_range(self) -> Tuple[int, int, int, int]:
        return (self.start_month, self.start_year, self.end_month, self.end_year)


@dataclass(frozen=True)
class SubjectRate:
    """Support rate for one beneficiary class"""

    key: str
    name: str
    rate: float


DEFAULT_SUPPORT_SUB_PERIODS: Tuple[SupportSubPeriod, ...] = (
    SupportSubPeriod("2018-2021", 1, 2018, 12, 2021, 700_000),
    SupportSubPeriod("2022-2025", 1, 2022, 12, 2025, 1_500_000),
)

DEFAULT_SUBJECT_RATES: Tuple[SubjectRate, ...] = (
    SubjectRate(SubjectType.POOR_HOUSEHOLD.value, "Hộ nghèo", 0.30),
    SubjectRate(SubjectType.NEAR_POOR_HOUSEHOLD.value, "Hộ cận nghèo", 0.25),
    SubjectRate(SubjectType.OTHER.value, "Đối tượng khác", 0.10),
)


def _contribution_key(contribution_type) -> str:
    return contribution_type.value if isinstance(contribution_type, PeriodType) else str(contribution_type)


@dataclass(frozen=True)
class SlipFactorTable:
    """
    Wage revaluation factors keyed by base year, contribution type and year.

    Lookup policy:
    - exact year: stored factor
    - year below the table minimum: the minimum year's factor
    - any other missing year: 1.0 (recent years are unadjusted until published)

    An unknown base year falls back to the default base year, and an unknown
    contribution type falls back to the compulsory series.
    """

    factors: Mapping[int, Mapping[str, Mapping[int, float]]]
    default_base_year: int = DEFAULT_BASE_YEAR

    def __post_init__(self) -> None:
        frozen = {
            int(base_year): MappingProxyType(
                {
                    _contribution_key(kind): MappingProxyType({int(y): float(f) for y, f in series.items()})
                    for kind, series in by_type.items()
                }
            )
            for base_year, by_type in self.factors.items()
        }
        object.__setattr__(self, "factors", MappingProxyType(frozen))

    def base_years(self) -> List[int]:
        return sorted(self.factors)

    def factors_for(self, contribution_type, base_year: int) -> Mapping[int, float]:
        """Flat year -> factor mapping for one contribution type"""
        by_type = self.factors.get(base_year) or self.factors.get(self.default_base_year) or {}
        key = _contribution_key(contribution_type)
        if key in by_type:
            return by_type[key]
        return by_type.get(PeriodType.COMPULSORY.value, MappingProxyType({}))

    def lookup(self, year: int, contribution_type, base_year: int) -> float:
        series = self.factors_for(contribution_type, base_year)
        if year in series:
            return series[year]
        if series and year < min(series):
            return series[min(series)]
        return 1.0

    def table_rows(self, contribution_type, base_year: int) -> List[Tuple[int, float]]:
        """(year, factor) rows, most recent year first"""
        series = self.factors_for(contribution_type, base_year)
        return [(year, series[year]) for year in sorted(series, reverse=True)]


@dataclass(frozen=True)
class GovSupportRule:
    """Support sub-periods and beneficiary rates for voluntary contributions"""

    sub_periods: Tuple[SupportSubPeriod, ...]
    subject_rates: Tuple[SubjectRate, ...]
    contribution_rate: float = VOLUNTARY_CONTRIBUTION_RATE
    _rates_by_key: Mapping[str, SubjectRate] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "sub_periods", tuple(self.sub_periods))
        object.__setattr__(self, "subject_rates", tuple(self.subject_rates))
        object.__setattr__(
            self, "_rates_by_key", MappingProxyType({r.key: r for r in self.subject_rates})
        )

    def subsidy_rate(self, subject_type) -> float:
        """Support rate for a beneficiary class, 0.0 when unrecognized"""
        entry = self._rates_by_key.get(_subject_key(subject_type))
        return entry.rate if entry else 0.0

    def subject_name(self, subject_type) -> str:
        entry = self._rates_by_key.get(_subject_key(subject_type))
        return entry.name if entry else UNKNOWN_SUBJECT_NAME

    def support_per_month(self, sub_period: SupportSubPeriod, subject_type) -> float:
        return self.contribution_rate * sub_period.base_value * self.subsidy_rate(subject_type)


def _subject_key(subject_type) -> str:
    if isinstance(subject_type, SubjectType):
        return subject_type.value
    return subject_type or ""


@dataclass(frozen=True)
class ReferenceTables:
    """Bundle of the reference data a calculation runs against"""

    slip_factors: SlipFactorTable
    gov_support: GovSupportRule


DEFAULT_TABLES = ReferenceTables(
    slip_factors=SlipFactorTable(DEFAULT_SLIP_FACTORS),
    gov_support=GovSupportRule(DEFAULT_SUPPORT_SUB_PERIODS, DEFAULT_SUBJECT_RATES),
)


def default_reference_tables() -> ReferenceTables:
    """Built-in reference tables (2026 slip factors, 2018-2025 support windows)"""
    return DEFAULT_TABLES


def slip_factor(year: int, contribution_type, base_year: int = DEFAULT_BASE_YEAR) -> float:
    return DEFAULT_TABLES.slip_factors.lookup(year, contribution_type, base_year)


def subsidy_rate(subject_type) -> float:
    return DEFAULT_TABLES.gov_support.subsidy_rate(subject_type)
