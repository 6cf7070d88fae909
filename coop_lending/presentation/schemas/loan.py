"""Loan quote and cost Pydantic schemas."""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from coop_lending.service.lending import (
    LoanCostSummary,
    MembershipTier,
    RepaymentInstallment,
)


class InstallmentSchema(BaseModel):
    """Schema for an installment in a repayment schedule."""

    installment_number: int = Field(..., ge=1, examples=[1])
    due_date: date = Field(
        ...,
        description="Due date in ISO 8601 format (YYYY-MM-DD)",
        examples=["2025-11-15"],
    )
    principal_amount: Decimal = Field(..., examples=["10000.00"])
    interest_amount: Decimal = Field(..., examples=["750.00"])
    total_amount: Decimal = Field(..., examples=["10750.00"])
    is_paid: bool = False

    @classmethod
    def from_installment(cls, inst: RepaymentInstallment) -> "InstallmentSchema":
        return cls(
            installment_number=inst.installment_number,
            due_date=inst.due_date,
            principal_amount=inst.principal_amount,
            interest_amount=inst.interest_amount,
            total_amount=inst.total_amount,
            is_paid=inst.is_paid,
        )


class LoanCostSchema(BaseModel):
    """Totals for a loan."""

    principal: Decimal
    total_interest: Decimal
    total_repayment: Decimal
    monthly_payment: Decimal

    @classmethod
    def from_summary(cls, summary: LoanCostSummary) -> "LoanCostSchema":
        return cls(
            principal=summary.principal,
            total_interest=summary.total_interest,
            total_repayment=summary.total_repayment,
            monthly_payment=summary.monthly_payment,
        )


class LoanCostRequestSchema(BaseModel):
    """
    Schema for POST /v1/loans/cost request body.

    Terms, including the maximum loan term from LENDING_MAX_LOAN_TERM_MONTHS,
    are checked by the lending engine itself so that invalid loans get the
    same INVALID_LOAN_TERMS error wherever they come from.
    """

    principal: Decimal = Field(..., examples=[30000])
    monthly_interest_rate: Decimal = Field(..., examples=[2.5])
    duration_months: int = Field(..., examples=[3])


class LoanQuoteRequestSchema(BaseModel):
    """Schema for POST /v1/loans/quote request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "member_id": "member_123",
                    "contribution_total": 20000,
                    "amount": 30000,
                    "duration_months": 3,
                    "has_active_loan": False,
                    "claimed_tier": "Premium",
                }
            ]
        }
    )
    member_id: Optional[str] = Field(None, max_length=255)
    contribution_total: int = Field(..., ge=0, examples=[20000])
    amount: int = Field(..., gt=0, description="Loan amount in naira", examples=[30000])
    duration_months: int = Field(..., ge=1, le=120, examples=[3])
    has_active_loan: bool = False
    claimed_tier: Optional[MembershipTier] = Field(
        None,
        description="Tier stated on the application form, if any",
    )
    start_date: Optional[date] = Field(
        None,
        description="Disbursement date (default: today)",
    )


class LoanQuoteResponseSchema(BaseModel):
    """Schema for POST /v1/loans/quote response body."""

    approved: bool
    tier: MembershipTier
    amount: int
    duration_months: int
    interest_rate: Optional[float] = None
    reason: Optional[str] = None
    message: Optional[str] = None
    cost: Optional[LoanCostSchema] = None
    schedule: list[InstallmentSchema] = Field(default_factory=list)
