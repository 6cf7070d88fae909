"""
Data models for the lending engine.

These are plain value records passed in and returned by the calculators.
None of them are persisted here; the calling layer stores what it needs.

Monetary fields on schedules and summaries are Decimals quantized to two
places (kobo). Contribution totals and penalties are whole currency units.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List, Optional, Tuple


class MembershipTier(str, Enum):
    """Membership class, ordered lower tier first."""
    BASIC = "Basic"
    PREMIUM = "Premium"


class EligibilityReason(str, Enum):
    """Why a loan request was turned down."""
    ACTIVE_LOAN = "active_loan"
    INSUFFICIENT_CONTRIBUTION = "insufficient_contribution"
    EXCEEDS_TIER_LIMIT = "exceeds_tier_limit"
    TIER_MISMATCH = "tier_mismatch"
    DURATION_EXCEEDS_TIER_LIMIT = "duration_exceeds_tier_limit"


class InstallmentStatus(str, Enum):
    PENDING = "pending"
    PARTIAL = "partial"
    OVERDUE = "overdue"
    PAID = "paid"


@dataclass(frozen=True)
class TierPolicy:
    """
    Everything a tier grants a member.

    Attributes:
        tier: The tier this policy describes
        min_contribution: Cumulative contribution needed to reach the tier
        max_loan_multiplier: Loan ceiling as a multiple of contribution
        monthly_interest_rate: Flat monthly rate in percent
        max_duration_months: Longest repayment period allowed
        benefits: Member-facing list of perks
        color: Badge color used by the member dashboard
    """
    tier: MembershipTier
    min_contribution: int
    max_loan_multiplier: int
    monthly_interest_rate: float
    max_duration_months: int
    benefits: Tuple[str, ...] = ()
    color: str = ""


@dataclass(frozen=True)
class EligibilityResult:
    """
    Outcome of a loan eligibility check.

    A declined request is a normal result, not an error: `reason` says which
    rule failed first and `message` is the member-facing text.
    """
    eligible: bool
    reason: Optional[EligibilityReason] = None
    message: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "eligible": self.eligible,
            "reason": self.reason.value if self.reason else None,
            "message": self.message,
        }


@dataclass(frozen=True)
class RepaymentInstallment:
    """A single monthly installment of a loan schedule."""
    installment_number: int
    due_date: date
    principal_amount: Decimal
    interest_amount: Decimal
    total_amount: Decimal
    is_paid: bool = False

    def to_dict(self) -> dict:
        return {
            "installment_number": self.installment_number,
            "due_date": self.due_date.isoformat(),
            "principal_amount": str(self.principal_amount),
            "interest_amount": str(self.interest_amount),
            "total_amount": str(self.total_amount),
            "is_paid": self.is_paid,
        }


@dataclass(frozen=True)
class LoanCostSummary:
    """Totals derived from a repayment schedule."""
    principal: Decimal
    total_interest: Decimal
    total_repayment: Decimal
    monthly_payment: Decimal


@dataclass(frozen=True)
class PenaltyResult:
    """Late-payment penalty in whole currency units, and days past grace."""
    penalty: int
    days_overdue: int


@dataclass(frozen=True)
class CreditCheck:
    """Purchase credit a member can draw against their savings."""
    eligible: bool
    available_credit: Decimal


@dataclass(frozen=True)
class LoanQuote:
    """
    Priced loan offer for a member.

    Declined quotes carry only the tier, reason and message; schedule and cost
    are filled in for approved quotes.
    """
    approved: bool
    tier: MembershipTier
    amount: int
    duration_months: int
    interest_rate: Optional[float] = None
    reason: Optional[EligibilityReason] = None
    message: Optional[str] = None
    cost: Optional[LoanCostSummary] = None
    schedule: List[RepaymentInstallment] = field(default_factory=list)


@dataclass(frozen=True)
class RepaymentOutcome:
    """
    State of an installment after a payment is recorded against it.

    Attributes:
        status: New installment status
        penalty: Penalty owed at the time of payment
        days_overdue: Days past the grace period
        total_due: Installment total plus penalty
        paid_amount: Cumulative amount paid including this payment
        penalty_paid: Portion of this payment that covers the penalty
        balance_remaining: What is still owed, never negative
    """
    status: InstallmentStatus
    penalty: int
    days_overdue: int
    total_due: Decimal
    paid_amount: Decimal
    penalty_paid: Decimal
    balance_remaining: Decimal
