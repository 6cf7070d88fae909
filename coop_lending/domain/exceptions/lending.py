"""Lending-related domain exceptions."""

from .base import DomainException


class InvalidAmountException(DomainException):
    """Raised when a monetary input is negative."""

    def __init__(self, field: str, value):
        super().__init__(
            message=f"{field} must not be negative: {value}",
            code="INVALID_AMOUNT",
        )
        self.field = field
        self.value = value


class InvalidLoanTermsException(DomainException):
    """Raised when principal, rate or duration cannot describe a loan."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_LOAN_TERMS",
        )
