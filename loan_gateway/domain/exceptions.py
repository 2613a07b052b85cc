"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class IncomeNotPositiveError(DomainException):
    """Monthly income is zero or negative, so income ratios are undefined"""

    pass
