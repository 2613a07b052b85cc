"""POST /calculate-rate - interest rate and amortization schedule endpoint"""

import logging
import time

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from loan_gateway.api.dependencies import get_request_id
from loan_gateway.api.v1.schemas import RateCalculationRequest, RateCalculationResponse
from loan_gateway.domain.amortization import calculate_rate_and_schedule
from loan_gateway.domain.products import product_for_purpose
from loan_gateway.infrastructure.observability.logging import log_rate_quote
from loan_gateway.infrastructure.observability.metrics import record_rate_quote

router = APIRouter()


@router.post("/calculate-rate", response_model=RateCalculationResponse)
def calculate_rate(request_body: RateCalculationRequest, request: Request):
    """
    Price a loan and return its amortization schedule.

    Returns:
        Rate, payment, totals and at most the first 24 months of the schedule
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        quote = calculate_rate_and_schedule(
            request_body.loan_amount,
            request_body.loan_term,
            request_body.credit_score,
            request_body.loan_type,
        )

    except Exception:
        logging.exception("Unexpected error during rate calculation", extra={"request_id": request_id})
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    # loan_type is free text; label by product to keep metric cardinality bounded
    product_id = product_for_purpose(quote.loan_type).id
    duration_ms = (time.time() - start_time) * 1000
    record_rate_quote(product_id)
    log_rate_quote(request_id, product_id, quote.interest_rate, request_body.loan_term, duration_ms)

    return RateCalculationResponse.from_quote(quote)
