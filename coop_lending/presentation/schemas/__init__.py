"""Pydantic schemas for API request/response validation."""

from .tier import (
    TierSchema,
    TierListResponseSchema,
    TierClassificationResponseSchema,
)
from .eligibility import (
    EligibilityRequestSchema,
    EligibilityResponseSchema,
    CreditCheckRequestSchema,
    CreditCheckResponseSchema,
)
from .loan import (
    InstallmentSchema,
    LoanCostSchema,
    LoanCostRequestSchema,
    LoanQuoteRequestSchema,
    LoanQuoteResponseSchema,
)
from .penalty import (
    PenaltyRequestSchema,
    PenaltyResponseSchema,
    RepaymentRequestSchema,
    RepaymentResponseSchema,
)
from .error import ErrorResponseSchema

__all__ = [
    "TierSchema",
    "TierListResponseSchema",
    "TierClassificationResponseSchema",
    "EligibilityRequestSchema",
    "EligibilityResponseSchema",
    "CreditCheckRequestSchema",
    "CreditCheckResponseSchema",
    "InstallmentSchema",
    "LoanCostSchema",
    "LoanCostRequestSchema",
    "LoanQuoteRequestSchema",
    "LoanQuoteResponseSchema",
    "PenaltyRequestSchema",
    "PenaltyResponseSchema",
    "RepaymentRequestSchema",
    "RepaymentResponseSchema",
    "ErrorResponseSchema",
]
