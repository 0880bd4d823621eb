"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from bhxh_calculator.api.main import create_app
from bhxh_calculator.domain.models import ContributionPeriod, PeriodType, SubjectType
from bhxh_calculator.domain.reference_tables import ReferenceTables, default_reference_tables


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def tables() -> ReferenceTables:
    """Built-in reference tables"""
    return default_reference_tables()


@pytest.fixture
def sample_periods() -> list[ContributionPeriod]:
    """Demonstration periods: one voluntary quarter in 2019, three compulsory quarters in 2024"""
    return [
        ContributionPeriod(
            id=1,
            type=PeriodType.VOLUNTARY,
            from_month=4,
            from_year=2019,
            to_month=6,
            to_year=2019,
            salary=1_000_000,
            subject_type=SubjectType.OTHER.value,
        ),
        ContributionPeriod(
            id=2,
            type=PeriodType.COMPULSORY,
            from_month=4,
            from_year=2024,
            to_month=6,
            to_year=2024,
            salary=4_456_000,
        ),
        ContributionPeriod(
            id=3,
            type=PeriodType.COMPULSORY,
            from_month=7,
            from_year=2024,
            to_month=9,
            to_year=2024,
            salary=4_706_000,
        ),
        ContributionPeriod(
            id=4,
            type=PeriodType.COMPULSORY,
            from_month=10,
            from_year=2024,
            to_month=12,
            to_year=2024,
            salary=4_736_000,
        ),
    ]


@pytest.fixture
def sample_payload() -> dict:
    """Request body for POST /v1/calculate with the demonstration periods"""
    return {
        "periods": [
            {"id": 1, "type": "voluntary", "from_month": 4, "from_year": 2019, "to_month": 6,
             "to_year": 2019, "salary": 1000000, "subject_type": "doi_tuong_khac"},
            {"id": 2, "type": "compulsory", "from_month": 4, "from_year": 2024, "to_month": 6,
             "to_year": 2024, "salary": 4456000},
            {"id": 3, "type": "compulsory", "from_month": 7, "from_year": 2024, "to_month": 9,
             "to_year": 2024, "salary": 4706000},
            {"id": 4, "type": "compulsory", "from_month": 10, "from_year": 2024, "to_month": 12,
             "to_year": 2024, "salary": 4736000},
        ],
        "slip_factor_year": 2026,
    }
