"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import Callable
from fastapi.testclient import TestClient
from decision_engine.api.main import create_app
from decision_engine.config import Settings
from stdnum.ee import ik


def build_personal_code(century_digit: int, year: int, month: int, segment: str) -> str:
    """
    Valid personal code with the given birth year/month and segment suffix.

    The segment's last digit is the check digit, so the birth day is searched
    until the checksum matches.
    """
    for day in range(1, 29):
        code = f"{century_digit}{year % 100:02d}{month:02d}{day:02d}{segment}"
        if ik.is_valid(code):
            return code
    raise ValueError(f"No valid code for {year}-{month:02d} segment {segment}")


@pytest.fixture
def settings() -> Settings:
    """Default loan settings"""
    return Settings()


@pytest.fixture
def personal_code() -> Callable[..., str]:
    """Factory for valid personal codes"""
    return build_personal_code


@pytest.fixture
def today() -> date:
    """Fixed reference date for age calculations"""
    return date(2024, 6, 15)


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)
