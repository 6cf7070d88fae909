"""Data transfer objects for lending operations."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Union

from coop_lending.service.lending import EligibilityResult, MembershipTier, TierPolicy


@dataclass(frozen=True)
class EligibilityRequest:
    """Input data for a loan eligibility check."""
    contribution_total: int
    requested_amount: int
    has_active_loan: bool = False
    member_id: Optional[str] = None


@dataclass(frozen=True)
class EligibilityResponse:
    """Eligibility outcome together with the member's tier and loan ceiling."""

    eligible: bool
    reason: Optional[str]
    message: Optional[str]
    tier: MembershipTier
    max_loan_amount: Decimal

    @classmethod
    def from_result(
        cls,
        result: EligibilityResult,
        policy: TierPolicy,
        max_loan_amount: Decimal,
    ) -> "EligibilityResponse":
        return cls(
            eligible=result.eligible,
            reason=result.reason.value if result.reason else None,
            message=result.message,
            tier=policy.tier,
            max_loan_amount=max_loan_amount,
        )


@dataclass(frozen=True)
class LoanQuoteRequest:
    """Input data for pricing a loan application."""
    contribution_total: int
    amount: int
    duration_months: int
    has_active_loan: bool = False
    claimed_tier: Optional[MembershipTier] = None
    start_date: Optional[date] = None
    member_id: Optional[str] = None


@dataclass(frozen=True)
class PenaltyRequest:
    """Input data for an overdue penalty calculation."""
    due_date: Union[date, datetime]
    total_amount: Decimal
    member_id: Optional[str] = None


@dataclass(frozen=True)
class RepaymentRequest:
    """A verified payment to apply against one installment."""
    installment_total: Decimal
    paid_amount: Decimal
    payment_amount: Decimal
    due_date: Union[date, datetime]
    member_id: Optional[str] = None
    payment_reference: Optional[str] = None
