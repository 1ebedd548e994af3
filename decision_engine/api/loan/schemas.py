"""Pydantic schemas for API request/response validation"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DecisionRequest(BaseModel):
    """Request body for POST /loan/decision"""

    model_config = ConfigDict(populate_by_name=True)

    personal_code: str = Field(..., alias="personalCode", description="Estonian personal ID code")
    loan_amount: int = Field(..., alias="loanAmount", description="Requested loan amount in euros")
    loan_period: int = Field(..., alias="loanPeriod", description="Requested loan period in months")


class DecisionResponse(BaseModel):
    """Response for POST /loan/decision, also used for error bodies"""

    model_config = ConfigDict(populate_by_name=True)

    loan_amount: Optional[int] = Field(None, alias="loanAmount")
    loan_period: Optional[int] = Field(None, alias="loanPeriod")
    error_message: Optional[str] = Field(None, alias="errorMessage")
