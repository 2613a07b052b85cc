"""POST /eligibility - loan eligibility decision endpoint"""

import logging
import time

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse

from loan_gateway.api.dependencies import get_request_id
from loan_gateway.api.v1.schemas import EligibilityRequest, EligibilityResponse
from loan_gateway.domain.exceptions import DomainException
from loan_gateway.domain.scoring import evaluate_eligibility
from loan_gateway.infrastructure.observability.logging import log_eligibility_decision
from loan_gateway.infrastructure.observability.metrics import record_eligibility_decision

router = APIRouter()


@router.post("/eligibility", response_model=EligibilityResponse)
def check_eligibility(request_body: EligibilityRequest, request: Request):
    """
    Evaluate an application and recommend a loan.

    Flow:
    1. Validate applicant and loan details (schema + product bounds)
    2. Run the eligibility engine
    3. Return verdict, recommended loan, and affordability analysis
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        profile, finances, loan = request_body.to_domain()
        assessment = evaluate_eligibility(profile, finances, loan)

    except DomainException as e:
        logging.warning(f"Eligibility rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception:
        logging.exception("Unexpected error during eligibility evaluation", extra={"request_id": request_id})
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    verdict = assessment.verdict
    duration_ms = (time.time() - start_time) * 1000
    record_eligibility_decision(verdict.is_eligible, verdict.risk_category.value, verdict.approval_likelihood)
    log_eligibility_decision(
        request_id,
        loan.purpose,
        verdict.is_eligible,
        verdict.approval_likelihood,
        verdict.risk_category.value,
        duration_ms,
    )

    return EligibilityResponse.from_assessment(assessment)
