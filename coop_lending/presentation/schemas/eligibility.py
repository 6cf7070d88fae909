"""Eligibility and purchase-credit Pydantic schemas."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from coop_lending.service.lending import MembershipTier


class EligibilityRequestSchema(BaseModel):
    """Schema for POST /v1/eligibility request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "member_id": "member_123",
                    "contribution_total": 15000,
                    "requested_amount": 25000,
                    "has_active_loan": False,
                }
            ]
        }
    )
    member_id: Optional[str] = Field(None, max_length=255)
    contribution_total: Decimal = Field(
        ...,
        ge=0,
        description="Cumulative member savings in naira",
        examples=[15000],
    )
    requested_amount: Decimal = Field(
        ...,
        ge=0,
        description="Loan amount requested in naira",
        examples=[25000],
    )
    has_active_loan: bool = Field(
        False,
        description="Whether the member still owes on a loan",
    )


class EligibilityResponseSchema(BaseModel):
    """Schema for POST /v1/eligibility response body."""

    eligible: bool
    reason: Optional[str] = Field(
        None,
        description="Code of the first rule that failed",
        examples=["exceeds_tier_limit"],
    )
    message: Optional[str] = Field(
        None,
        examples=["Maximum loan amount for your tier is ₦30,000"],
    )
    tier: MembershipTier
    max_loan_amount: Decimal


class CreditCheckRequestSchema(BaseModel):
    """Schema for POST /v1/credit request body."""

    savings_balance: Decimal = Field(..., ge=0, examples=[40000])
    loan_balance: Decimal = Field(Decimal(0), ge=0, examples=[5000])
    amount: Decimal = Field(..., ge=0, description="Purchase amount", examples=[12000])


class CreditCheckResponseSchema(BaseModel):
    """Schema for POST /v1/credit response body."""

    eligible: bool
    available_credit: Decimal
