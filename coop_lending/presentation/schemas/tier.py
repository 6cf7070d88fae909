"""Tier-related Pydantic schemas."""

from decimal import Decimal

from pydantic import BaseModel, Field

from coop_lending.service.lending import MembershipTier, TierPolicy


class TierSchema(BaseModel):
    """A tier and what it grants."""

    tier: MembershipTier = Field(..., description="Tier name", examples=["Basic"])
    min_contribution: int = Field(
        ...,
        ge=0,
        description="Cumulative contribution needed to reach the tier",
        examples=[10000],
    )
    max_loan_multiplier: int = Field(
        ...,
        ge=1,
        description="Loan ceiling as a multiple of contribution",
        examples=[2],
    )
    monthly_interest_rate: float = Field(
        ...,
        description="Flat monthly interest rate in percent",
        examples=[2.5],
    )
    max_duration_months: int = Field(..., ge=1, examples=[6])
    benefits: list[str] = Field(default_factory=list)
    color: str = Field(..., examples=["blue"])

    @classmethod
    def from_policy(cls, policy: TierPolicy) -> "TierSchema":
        return cls(
            tier=policy.tier,
            min_contribution=policy.min_contribution,
            max_loan_multiplier=policy.max_loan_multiplier,
            monthly_interest_rate=policy.monthly_interest_rate,
            max_duration_months=policy.max_duration_months,
            benefits=list(policy.benefits),
            color=policy.color,
        )


class TierListResponseSchema(BaseModel):
    """Schema for GET /v1/tiers response."""

    tiers: list[TierSchema]


class TierClassificationResponseSchema(BaseModel):
    """Schema for GET /v1/tiers/classify response."""

    contribution_total: Decimal
    max_loan_amount: Decimal = Field(
        ...,
        description="Largest loan the contribution supports",
    )
    policy: TierSchema
