"""Loan decision flow: input validation, age check, segment lookup, search"""

import logging
from datetime import date
from typing import Optional

from decision_engine.config import Settings, settings as default_settings
from decision_engine.domain.exceptions import (
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
    InvalidPersonalCodeError,
)
from decision_engine.domain.identity import is_valid_personal_code, verify_age
from decision_engine.domain.models import DecisionOutcome, NoEligibleLoan
from decision_engine.domain.scoring import decide
from decision_engine.domain.segments import extract_segment, resolve_modifier

logger = logging.getLogger(__name__)


def verify_inputs(personal_code: str, loan_amount: int, loan_period: int, settings: Settings = default_settings) -> None:
    """
    Check request values against business rules, in order: code, amount, period.

    Raises:
        InvalidPersonalCodeError, InvalidLoanAmountError, InvalidLoanPeriodError
    """
    if not is_valid_personal_code(personal_code):
        raise InvalidPersonalCodeError("Invalid personal ID code!")
    if not settings.min_loan_amount <= loan_amount <= settings.max_loan_amount:
        raise InvalidLoanAmountError("Invalid loan amount!")
    if not settings.min_loan_period <= loan_period <= settings.max_loan_period:
        raise InvalidLoanPeriodError("Invalid loan period!")


def calculate_approved_loan(
    personal_code: str,
    loan_amount: int,
    loan_period: int,
    settings: Settings = default_settings,
    today: Optional[date] = None,
) -> DecisionOutcome:
    """
    Main entry point: validate the request and find the approvable loan.

    Returns LoanDecision or NoEligibleLoan. Invalid input raises a
    ValidationError subclass.
    """
    verify_inputs(personal_code, loan_amount, loan_period, settings)
    verify_age(personal_code, settings, today)

    segment = extract_segment(personal_code)
    modifier = resolve_modifier(segment, settings)
    if modifier is None:
        logger.info("Unmapped segment", extra={"segment": segment})
        return NoEligibleLoan()

    return decide(modifier, loan_amount, loan_period, settings)
