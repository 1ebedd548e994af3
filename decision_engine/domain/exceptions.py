"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ValidationError(DomainException):
    """Request data breaks a business rule and cannot be decided on"""

    pass


class InvalidPersonalCodeError(ValidationError):
    """Personal ID code is malformed or fails the check digit"""

    pass


class InvalidLoanAmountError(ValidationError):
    """Requested amount is outside the configured bounds"""

    pass


class InvalidLoanPeriodError(ValidationError):
    """Requested period is outside the configured bounds"""

    pass


class InvalidAgeError(ValidationError):
    """Customer is too young or too old for a loan"""

    pass
