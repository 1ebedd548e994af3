"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class LoanRequest:
    """Validated loan request handed to the decision search"""

    risk_modifier: int
    amount: int
    period_months: int


@dataclass(frozen=True)
class LoanDecision:
    """Approved loan amount and period"""

    amount: int
    period_months: int


@dataclass(frozen=True)
class NoEligibleLoan:
    """No amount/period combination clears the minimum credit score"""

    message: str = "No valid loan found!"


DecisionOutcome = Union[LoanDecision, NoEligibleLoan]
