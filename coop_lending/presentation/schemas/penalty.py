"""Penalty and repayment Pydantic schemas."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Union

from pydantic import BaseModel, Field

from coop_lending.service.lending import InstallmentStatus


class PenaltyRequestSchema(BaseModel):
    """Schema for POST /v1/penalty request body."""

    member_id: Optional[str] = Field(None, max_length=255)
    due_date: Union[datetime, date] = Field(
        ...,
        description="When the installment fell due (date or ISO 8601 datetime)",
        examples=["2025-10-01"],
    )
    total_amount: Decimal = Field(..., ge=0, examples=[10000])


class PenaltyResponseSchema(BaseModel):
    """Schema for POST /v1/penalty response body."""

    penalty: int = Field(..., ge=0, description="Penalty in whole naira", examples=[50])
    days_overdue: int = Field(
        ...,
        ge=0,
        description="Days past the grace period",
        examples=[5],
    )


class RepaymentRequestSchema(BaseModel):
    """Schema for POST /v1/repayments request body."""

    member_id: Optional[str] = Field(None, max_length=255)
    payment_reference: Optional[str] = Field(
        None,
        max_length=255,
        description="Reference of the verified payment",
    )
    installment_total: Decimal = Field(..., ge=0, examples=[10750])
    paid_amount: Decimal = Field(Decimal(0), ge=0)
    payment_amount: Decimal = Field(..., ge=0, examples=[10750])
    due_date: Union[datetime, date]


class RepaymentResponseSchema(BaseModel):
    """Schema for POST /v1/repayments response body."""

    status: InstallmentStatus
    penalty: int
    days_overdue: int
    total_due: Decimal
    paid_amount: Decimal
    penalty_paid: Decimal
    balance_remaining: Decimal
