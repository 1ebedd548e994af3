"""Unit tests for credit score and loan decision search"""

import pytest
from decision_engine.config import Settings
from decision_engine.domain.models import LoanDecision, NoEligibleLoan
from decision_engine.domain.scoring import credit_score, decide

MODIFIERS = [100, 300, 1000]
AMOUNTS = range(2000, 10001, 5)
PERIODS = range(12, 49)


def test_credit_score_formula():
    """Test score = (modifier / amount) * period / 10"""
    assert credit_score(1000, 4000, 12) == pytest.approx(0.3)
    assert credit_score(100, 2000, 12) == pytest.approx(0.06)
    assert credit_score(100, 10000, 12) == pytest.approx(0.012)


@pytest.mark.parametrize("modifier", MODIFIERS)
def test_credit_score_decreases_with_amount(modifier: int):
    """Test score strictly decreases as amount grows, at every configured step"""
    for period in (12, 30, 48):
        scores = [credit_score(modifier, amount, period) for amount in AMOUNTS]
        assert all(a > b for a, b in zip(scores, scores[1:]))


@pytest.mark.parametrize("modifier", MODIFIERS)
def test_credit_score_increases_with_period(modifier: int):
    """Test score strictly increases with period"""
    for amount in (2000, 5555, 10000):
        scores = [credit_score(modifier, amount, period) for period in PERIODS]
        assert all(a < b for a, b in zip(scores, scores[1:]))


def test_credit_score_increases_with_modifier():
    """Test score strictly increases with modifier"""
    for amount in (2000, 10000):
        for period in (12, 48):
            scores = [credit_score(modifier, amount, period) for modifier in range(1, 1001)]
            assert all(a < b for a, b in zip(scores, scores[1:]))


def test_decide_high_modifier_grows_to_max_amount():
    """Scenario: segment 0998, 4000 over 12 months -> capped at maximum amount"""
    assert decide(1000, 4000, 12) == LoanDecision(amount=10000, period_months=12)


def test_decide_zero_modifier_not_eligible():
    """Debt segment never gets a loan"""
    assert isinstance(decide(0, 4000, 12), NoEligibleLoan)
    assert isinstance(decide(0, 2000, 48), NoEligibleLoan)


def test_decide_grow_returns_first_amount_not_above_threshold():
    """
    Growth stops at the first amount whose score is no longer above 0.1.

    Pinned: 3595 is the last amount still above the threshold, but 3600 is
    returned. Kept until product confirms the intended rounding.
    """
    assert credit_score(300, 3595, 12) > 0.1
    assert credit_score(300, 3600, 12) <= 0.1

    assert decide(300, 2000, 12) == LoanDecision(amount=3600, period_months=12)


def test_decide_lowers_amount_at_requested_period():
    """Amount sweep descends from the request until the score qualifies"""
    assert decide(300, 10000, 12) == LoanDecision(amount=3600, period_months=12)


def test_decide_extends_period_when_no_amount_qualifies():
    """Scenario: modifier 100, 10000 over 12 months -> minimum amount over 20 months"""
    assert decide(100, 10000, 12) == LoanDecision(amount=2000, period_months=20)
    assert decide(100, 4000, 12) == LoanDecision(amount=2000, period_months=20)


def test_decide_never_offers_amount_below_minimum():
    """Requesting the minimum leaves no lower amount to try"""
    # 1995 over 20 months would score above 0.1, but is below the minimum
    assert credit_score(100, 1995, 20) >= 0.1
    assert isinstance(decide(100, 2000, 12), NoEligibleLoan)


def test_decide_minimum_amount_low_modifier_not_eligible():
    """Nothing qualifies even at the longest period"""
    assert isinstance(decide(1, 2000, 12), NoEligibleLoan)
    assert isinstance(decide(1, 10000, 48), NoEligibleLoan)


def test_decide_one_step_above_minimum():
    """Sweep reaches the minimum amount and then extends the period"""
    assert decide(100, 2005, 12) == LoanDecision(amount=2000, period_months=20)


def test_decide_keeps_requested_period_when_amount_qualifies():
    assert decide(1000, 10000, 48) == LoanDecision(amount=10000, period_months=48)


@pytest.mark.parametrize("modifier", MODIFIERS)
def test_decide_results_within_bounds(modifier: int):
    """Any returned decision respects the configured amount and period bounds"""
    for amount in range(2000, 10001, 1000):
        for period in (12, 24, 36, 48):
            outcome = decide(modifier, amount, period)
            if isinstance(outcome, LoanDecision):
                assert 2000 <= outcome.amount <= 10000
                assert period <= outcome.period_months <= 48


def test_decide_is_idempotent():
    """Repeated calls with identical inputs give identical results"""
    first = decide(300, 7000, 24)
    assert decide(1000, 2000, 12) == LoanDecision(amount=10000, period_months=12)
    assert decide(0, 7000, 24) == NoEligibleLoan()
    assert decide(300, 7000, 24) == first


def test_decide_respects_custom_settings():
    """Bounds and threshold come from settings"""
    narrow = Settings(max_loan_amount=5000)
    assert decide(1000, 4000, 12, narrow) == LoanDecision(amount=5000, period_months=12)

    strict = Settings(min_credit_score=0.5)
    assert isinstance(decide(100, 10000, 12, strict), NoEligibleLoan)
