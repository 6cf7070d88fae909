"""
Loan Application Quoting for the cooperative lending engine.

This module orchestrates pricing a loan application:
1. Classify the member's tier from their contribution
2. Reject a mismatched tier claim from the application form
3. Enforce the tier's loan ceiling (contribution x multiplier)
4. Enforce the tier's maximum repayment period
5. Apply the standard eligibility rules (active loan, minimum contribution)
6. Price the loan at the tier rate and build its schedule

The tier limits are checked before the standard eligibility rules, so a
member with an active loan who also asks for too much is told about the
tier limit first.

Declined applications come back as a LoanQuote with approved=False, the same
way eligibility checks report ineligibility.
"""

from datetime import date, datetime
from typing import Optional, Union

from .credit_limit import check_loan_eligibility, max_loan_amount
from .loan_cost import calculate_loan_cost
from .models import EligibilityReason, LoanQuote, MembershipTier
from .money import format_naira, require_non_negative, to_decimal
from .schedule import calculate_repayment_schedule, validate_loan_terms
from .settings import LendingSettings, lending_settings
from .tiers import classify_tier, get_tier_policy


def quote_loan_application(
    contribution_total: int,
    amount: int,
    duration_months: int,
    has_active_loan: bool,
    claimed_tier: Optional[MembershipTier] = None,
    start_date: Optional[Union[date, datetime]] = None,
    settings: LendingSettings = lending_settings,
) -> LoanQuote:
    """
    Price a loan application, or explain why it cannot be granted.

    Args:
        contribution_total: Cumulative member savings
        amount: Loan amount requested
        duration_months: Requested repayment period
        has_active_loan: Whether the member still owes on a loan
        claimed_tier: Tier the member applied under, if the form states one
        start_date: Disbursement date for the schedule (default: today)
        settings: Lending settings (uses defaults if not provided)

    Returns:
        LoanQuote with schedule and cost when approved

    Raises:
        InvalidAmountException: If contribution_total is negative
        InvalidLoanTermsException: If amount or duration are not a valid loan
    """
    require_non_negative("contribution_total", contribution_total)
    validate_loan_terms(amount, 0, duration_months, settings)

    tier = classify_tier(contribution_total, settings)
    policy = get_tier_policy(tier, settings)

    def declined(reason: EligibilityReason, message: str) -> LoanQuote:
        return LoanQuote(
            approved=False,
            tier=tier,
            amount=amount,
            duration_months=duration_months,
            reason=reason,
            message=message,
        )

    if claimed_tier is not None and MembershipTier(claimed_tier) != tier:
        return declined(
            EligibilityReason.TIER_MISMATCH,
            f"Tier mismatch: Your contribution of {format_naira(contribution_total)} "
            f"qualifies for {tier.value} tier, not {MembershipTier(claimed_tier).value} tier",
        )

    ceiling = max_loan_amount(contribution_total, settings)
    if to_decimal(amount) > ceiling:
        return declined(
            EligibilityReason.EXCEEDS_TIER_LIMIT,
            f"Loan amount exceeds {tier.value} tier limit. "
            f"Maximum: {format_naira(ceiling)} "
            f"({policy.max_loan_multiplier}x your contribution)",
        )

    if duration_months > policy.max_duration_months:
        return declined(
            EligibilityReason.DURATION_EXCEEDS_TIER_LIMIT,
            f"Repayment duration exceeds {tier.value} tier limit. "
            f"Maximum: {policy.max_duration_months} months",
        )

    eligibility = check_loan_eligibility(
        contribution_total, amount, has_active_loan, settings
    )
    if not eligibility.eligible:
        return declined(eligibility.reason, eligibility.message)

    rate = policy.monthly_interest_rate

    return LoanQuote(
        approved=True,
        tier=tier,
        amount=amount,
        duration_months=duration_months,
        interest_rate=rate,
        cost=calculate_loan_cost(amount, rate, duration_months, settings),
        schedule=calculate_repayment_schedule(
            amount, rate, duration_months, start_date, settings
        ),
    )
