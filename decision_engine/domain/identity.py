"""Estonian personal ID code (isikukood) validation and age extraction"""

from datetime import date
from typing import Optional

from stdnum.ee import ik

from decision_engine.config import Settings, settings as default_settings
from decision_engine.domain.exceptions import InvalidAgeError
from decision_engine.utils.date_utils import full_years_between


def is_valid_personal_code(personal_code: Optional[str]) -> bool:
    """
    Check length, digits, birth date and check digit.

    Codes are taken as sent: separators that stdnum would strip are rejected.
    """
    if not personal_code or ik.compact(personal_code) != personal_code:
        return False
    return ik.is_valid(personal_code)


def calculate_age(personal_code: str, today: Optional[date] = None) -> int:
    """Age in completed years as of today"""
    return full_years_between(ik.get_birth_date(personal_code), today or date.today())


def verify_age(personal_code: str, settings: Settings = default_settings, today: Optional[date] = None) -> int:
    """
    Ensure the customer is old enough and within the expected lifespan.

    Codes for the 2100s decode to a future birth date and a negative age.

    Raises:
        InvalidAgeError: age < min_age or age >= max_age
    """
    age = calculate_age(personal_code, today)
    if age < settings.min_age or age >= settings.max_age:
        raise InvalidAgeError("Invalid age for loan.")
    return age
