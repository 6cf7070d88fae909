"""Data Transfer Objects for application layer."""

from .lending import (
    EligibilityRequest,
    EligibilityResponse,
    LoanQuoteRequest,
    PenaltyRequest,
    RepaymentRequest,
)

__all__ = [
    "EligibilityRequest",
    "EligibilityResponse",
    "LoanQuoteRequest",
    "PenaltyRequest",
    "RepaymentRequest",
]
