"""
Cooperative Savings and Lending Engine
"""

from .models import (
    MembershipTier,
    TierPolicy,
    EligibilityReason,
    EligibilityResult,
    InstallmentStatus,
    RepaymentInstallment,
    LoanCostSummary,
    PenaltyResult,
    CreditCheck,
    LoanQuote,
    RepaymentOutcome,
)
from .settings import LendingSettings, lending_settings, get_lending_settings
from .clock import Clock, SystemClock, FixedClock, system_clock
from .tiers import (
    classify_tier,
    get_tier_policy,
    list_tier_policies,
    get_tier_interest_rate,
    get_tier_max_duration,
)
from .credit_limit import max_loan_amount, check_loan_eligibility
from .schedule import calculate_repayment_schedule, add_months, validate_loan_terms
from .loan_cost import calculate_loan_cost
from .penalty import calculate_penalty
from .credit import calculate_available_credit, check_credit_eligibility
from .quote import quote_loan_application
from .repayment import apply_repayment, is_loan_repaid

__all__ = [
    # Settings
    "LendingSettings",
    "lending_settings",
    "get_lending_settings",
    # Clock
    "Clock",
    "SystemClock",
    "FixedClock",
    "system_clock",
    # Models
    "MembershipTier",
    "TierPolicy",
    "EligibilityReason",
    "EligibilityResult",
    "InstallmentStatus",
    "RepaymentInstallment",
    "LoanCostSummary",
    "PenaltyResult",
    "CreditCheck",
    "LoanQuote",
    "RepaymentOutcome",
    # Tiers
    "classify_tier",
    "get_tier_policy",
    "list_tier_policies",
    "get_tier_interest_rate",
    "get_tier_max_duration",
    # Credit Limit
    "max_loan_amount",
    "check_loan_eligibility",
    # Schedule
    "calculate_repayment_schedule",
    "add_months",
    "validate_loan_terms",
    # Loan Cost
    "calculate_loan_cost",
    # Penalty
    "calculate_penalty",
    # Purchase Credit
    "calculate_available_credit",
    "check_credit_eligibility",
    # Quote
    "quote_loan_application",
    # Repayment
    "apply_repayment",
    "is_loan_repaid",
]
