"""Domain Exceptions - Precondition violations and domain errors."""

from .base import DomainException
from .lending import (
    InvalidAmountException,
    InvalidLoanTermsException,
)

__all__ = [
    "DomainException",
    "InvalidAmountException",
    "InvalidLoanTermsException",
]
