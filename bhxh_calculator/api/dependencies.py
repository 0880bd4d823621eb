"""Dependency injection for FastAPI endpoints"""

from functools import lru_cache

from fastapi import Request

from bhxh_calculator.config import settings
from bhxh_calculator.domain.reference_tables import ReferenceTables
from bhxh_calculator.infrastructure.reference_data.loader import resolve_reference_tables


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


@lru_cache(maxsize=1)
def get_reference_tables() -> ReferenceTables:
    """Reference tables shared read-only by every calculation"""
    return resolve_reference_tables(settings.reference_tables_path)
