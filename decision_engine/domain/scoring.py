"""Loan decision search - core business logic for approved amount and period"""

from decision_engine.config import Settings, settings as default_settings
from decision_engine.domain.models import DecisionOutcome, LoanDecision, LoanRequest, NoEligibleLoan


def credit_score(risk_modifier: int, amount: int, period_months: int) -> float:
    """
    Credit score for a given modifier, loan amount and period.

    score = (modifier / amount) * period / 10

    Increases with modifier and period, decreases with amount. The decision
    search relies on this monotonicity.
    """
    return (risk_modifier / amount) * period_months / 10


def _grow_amount(request: LoanRequest, settings: Settings) -> LoanDecision:
    """
    Raise the amount in fixed steps while the score stays above the threshold.

    The returned amount is the first one whose score is no longer above the
    threshold, not the last one still above it. Product has not confirmed
    whether this is intended, so it is kept as is and pinned in tests.
    """
    amount = request.amount
    while (
        credit_score(request.risk_modifier, amount, request.period_months) > settings.min_credit_score
        and amount < settings.max_loan_amount
    ):
        amount += settings.amount_step

    return LoanDecision(amount=min(amount, settings.max_loan_amount), period_months=request.period_months)


def _search_lower_amount(request: LoanRequest, settings: Settings) -> DecisionOutcome:
    """
    Look for a qualifying smaller amount, extending the period when none exists.

    Period ascends in the outer loop, amount descends in the inner loop. Every
    sweep restarts from the requested amount and the first candidate tested is
    one step below it. Amounts under the minimum are never offered.
    """
    for period in range(request.period_months, settings.max_loan_period + 1):
        amount = request.amount
        while True:
            amount -= settings.amount_step
            if amount < settings.min_loan_amount:
                break
            if credit_score(request.risk_modifier, amount, period) >= settings.min_credit_score:
                return LoanDecision(amount=amount, period_months=period)

    return NoEligibleLoan()


def decide(
    risk_modifier: int,
    amount: int,
    period_months: int,
    settings: Settings = default_settings,
) -> DecisionOutcome:
    """
    Find the maximum approvable amount for the request.

    Flow:
    1. Zero modifier: customer is not eligible
    2. Requested loan qualifies: grow amount up to the maximum
    3. Otherwise: lower the amount, then lengthen the period, until the score
       clears the threshold or the maximum period is exhausted

    Returns:
        LoanDecision on success, NoEligibleLoan when nothing qualifies
    """
    if risk_modifier <= 0:
        return NoEligibleLoan()

    request = LoanRequest(risk_modifier=risk_modifier, amount=amount, period_months=period_months)

    if credit_score(risk_modifier, amount, period_months) >= settings.min_credit_score:
        return _grow_amount(request, settings)

    return _search_lower_amount(request, settings)
