"""Risk segment lookup from the personal ID code"""

from typing import Optional

from decision_engine.config import Settings, settings as default_settings

SEGMENT_DIGITS = 4


def extract_segment(personal_code: str) -> int:
    """Segment code is the last four digits of the personal code"""
    return int(personal_code[-SEGMENT_DIGITS:])


def resolve_modifier(segment: int, settings: Settings = default_settings) -> Optional[int]:
    """
    Map a segment code to its credit modifier.

    Returns None for unmapped segments. Callers treat that the same as a zero
    modifier: no eligible loan.
    """
    return settings.credit_modifiers.get(segment)
