"""POST /loan/decision - loan amount and period decision endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from decision_engine.api.loan.schemas import DecisionRequest, DecisionResponse
from decision_engine.api.dependencies import get_request_id, get_settings
from decision_engine.config import Settings
from decision_engine.domain.exceptions import ValidationError
from decision_engine.domain.models import NoEligibleLoan
from decision_engine.domain.service import calculate_approved_loan
from decision_engine.infrastructure.observability.metrics import record_decision
from decision_engine.infrastructure.observability.logging import log_decision

router = APIRouter()

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


def error_response(status_code: int, message: str) -> JSONResponse:
    """Error body in the same shape as a successful decision"""
    body = DecisionResponse(error_message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


@router.post(
    "/decision",
    response_model=DecisionResponse,
    responses={
        400: {"model": DecisionResponse, "description": "Invalid code, amount, period or age"},
        404: {"model": DecisionResponse, "description": "No valid loan found"},
        500: {"model": DecisionResponse, "description": "Unexpected error"},
    },
)
def request_decision(
    request_body: DecisionRequest,
    request: Request,
    settings: Settings = Depends(get_settings),
):
    """
    Decide the maximum loan amount and period for a customer.

    Flow:
    1. Validate personal code, amount and period
    2. Check customer age from the personal code
    3. Resolve credit modifier from the code's segment
    4. Search for the best qualifying amount/period
    5. Map the outcome to a response: 200 decision, 400 invalid input,
       404 no valid loan, 500 unexpected error
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        outcome = calculate_approved_loan(
            request_body.personal_code,
            request_body.loan_amount,
            request_body.loan_period,
            settings,
        )

    except ValidationError as e:
        record_decision("invalid")
        logging.warning(f"Invalid request: {e}", extra={"request_id": request_id})
        return error_response(400, str(e))

    except Exception as e:
        record_decision("error")
        logging.error(f"Unexpected error: {e!r}", exc_info=True, extra={"request_id": request_id})
        return error_response(500, UNEXPECTED_ERROR_MESSAGE)

    duration_ms = (time.time() - start_time) * 1000

    if isinstance(outcome, NoEligibleLoan):
        record_decision("not_found")
        log_decision(request_id, "not_found", None, None, duration_ms)
        return error_response(404, outcome.message)

    record_decision("approved", outcome.amount, outcome.period_months)
    log_decision(request_id, "approved", outcome.amount, outcome.period_months, duration_ms)

    return DecisionResponse(loan_amount=outcome.amount, loan_period=outcome.period_months)
