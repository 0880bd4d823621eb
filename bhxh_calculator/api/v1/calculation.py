"""POST /v1/calculate - lump-sum benefit calculation endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from bhxh_calculator.api.v1.schemas import CalculationRequest, CalculationResponse
from bhxh_calculator.api.dependencies import get_reference_tables, get_request_id
from bhxh_calculator.domain.calculator import calculate
from bhxh_calculator.domain.exceptions import ValidationError
from bhxh_calculator.domain.reference_tables import ReferenceTables
from bhxh_calculator.infrastructure.observability.metrics import record_calculation, record_rejection
from bhxh_calculator.infrastructure.observability.logging import log_calculation

router = APIRouter()


@router.post("/calculate", response_model=CalculationResponse)
def create_calculation(
    request_body: CalculationRequest,
    request: Request,
    tables: ReferenceTables = Depends(get_reference_tables),
):
    """
    Compute the one-time social insurance benefit.

    Flow:
    1. Convert request periods to domain periods (missing ids get their position)
    2. Run the calculation engine against the shared reference tables
    3. Record metrics and logs
    4. Return the full breakdown
    """
    start_time = time.time()
    request_id = get_request_id(request)
    base_year = request_body.slip_factor_year or tables.slip_factors.default_base_year

    periods = [p.to_domain(index) for index, p in enumerate(request_body.periods, start=1)]

    try:
        result = calculate(periods, base_year, tables)

    except ValidationError as e:
        record_rejection()
        logging.warning(f"Calculation rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_calculation(result)
    log_calculation(request_id, len(result.periods), result.final_amount, base_year, duration_ms)

    return CalculationResponse.model_validate(result)
