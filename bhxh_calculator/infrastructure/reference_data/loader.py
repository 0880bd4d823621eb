"""Load reference tables from a JSON document"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field, model_validator
from pydantic import ValidationError as SchemaValidationError

from bhxh_calculator.domain.exceptions import ReferenceDataError
from bhxh_calculator.domain.reference_tables import (
    DEFAULT_BASE_YEAR,
    VOLUNTARY_CONTRIBUTION_RATE,
    GovSupportRule,
    ReferenceTables,
    SlipFactorTable,
    SubjectRate,
    SupportSubPeriod,
    default_reference_tables,
)

logger = logging.getLogger(__name__)


class SubPeriodSchema(BaseModel):
    key: str
    start_month: int = Field(..., ge=1, le=12)
    start_year: int
    end_month: int = Field(..., ge=1, le=12)
    end_year: int
    base_value: float = Field(..., ge=0)


class SubjectRateSchema(BaseModel):
    key: str
    name: str
    rate: float = Field(..., ge=0, le=1)


class GovSupportSchema(BaseModel):
    contribution_rate: float = Field(VOLUNTARY_CONTRIBUTION_RATE, ge=0, le=1)
    sub_periods: List[SubPeriodSchema]
    subject_rates: List[SubjectRateSchema]


class ReferenceTablesFile(BaseModel):
    """
    Layout of a reference table file.

    Example:
        {
          "default_base_year": 2026,
          "slip_factors": {"2026": {"compulsory": {"1995": 5.01}, "voluntary": {}}},
          "gov_support": {
            "sub_periods": [{"key": "2018-2021", "start_month": 1, "start_year": 2018,
                             "end_month": 12, "end_year": 2021, "base_value": 700000}],
            "subject_rates": [{"key": "ho_ngheo", "name": "Hộ nghèo", "rate": 0.3}]
          }
        }
    """

    default_base_year: int = DEFAULT_BASE_YEAR
    slip_factors: Dict[int, Dict[str, Dict[int, float]]]
    gov_support: GovSupportSchema

    @model_validator(mode="after")
    def _default_year_has_table(self) -> "ReferenceTablesFile":
        if self.default_base_year not in self.slip_factors:
            raise ValueError(
                f"default_base_year {self.default_base_year} has no slip factor table "
                f"(available: {sorted(self.slip_factors)})"
            )
        return self

    def to_tables(self) -> ReferenceTables:
        support = self.gov_support
        return ReferenceTables(
            slip_factors=SlipFactorTable(self.slip_factors, default_base_year=self.default_base_year),
            gov_support=GovSupportRule(
                sub_periods=tuple(SupportSubPeriod(**sp.model_dump()) for sp in support.sub_periods),
                subject_rates=tuple(SubjectRate(**r.model_dump()) for r in support.subject_rates),
                contribution_rate=support.contribution_rate,
            ),
        )


def load_reference_tables(path: Union[str, Path]) -> ReferenceTables:
    """Parse and validate a reference table file"""
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ReferenceDataError(f"Cannot read reference tables from {path}: {e}") from e

    try:
        document = ReferenceTablesFile.model_validate(raw)
    except SchemaValidationError as e:
        raise ReferenceDataError(f"Invalid reference tables in {path}: {e}") from e

    logger.info(
        "Loaded reference tables",
        extra={"path": str(path), "base_years": sorted(document.slip_factors)},
    )
    return document.to_tables()


def resolve_reference_tables(path: Optional[str] = None) -> ReferenceTables:
    """Tables from the configured file, or the built-in defaults when unset"""
    if not path:
        return default_reference_tables()
    return load_reference_tables(path)
