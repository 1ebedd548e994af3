"""Configuration management using Pydantic Settings"""

from typing import Dict, List

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore", frozen=True)

    # Loan bounds
    min_loan_amount: int = 2000
    max_loan_amount: int = 10000
    min_loan_period: int = 12
    max_loan_period: int = 48
    amount_step: int = 5

    # Scoring
    min_credit_score: float = 0.1

    # Age limits (max is exclusive, expected lifespan)
    min_age: int = 18
    max_age: int = 78

    # Segment code (last four digits of personal code) -> credit modifier
    credit_modifiers: Dict[int, int] = {
        965: 0,
        976: 100,
        987: 300,
        998: 1000,
        115: 100,
    }

    # Service
    service_name: str = "decision-engine"
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    @model_validator(mode="after")
    def check_bounds(self) -> "Settings":
        if self.min_loan_amount > self.max_loan_amount:
            raise ValueError("min_loan_amount must not exceed max_loan_amount")
        if self.min_loan_period > self.max_loan_period:
            raise ValueError("min_loan_period must not exceed max_loan_period")
        if self.min_age >= self.max_age:
            raise ValueError("min_age must be below max_age")
        if self.amount_step <= 0:
            raise ValueError("amount_step must be positive")
        return self


settings = Settings()
