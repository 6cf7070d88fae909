"""
Credit Limit and Loan Eligibility for the cooperative lending engine.

A member may borrow a multiple of what they have saved, the multiple set by
their tier. Eligibility rules are checked in a fixed order and the first
failing rule is the one reported.
"""

from decimal import Decimal

from .models import EligibilityReason, EligibilityResult
from .money import Amount, format_naira, require_non_negative
from .settings import LendingSettings, lending_settings
from .tiers import classify_tier, get_tier_policy


def max_loan_amount(
    contribution_total: Amount,
    settings: LendingSettings = lending_settings,
) -> Decimal:
    """
    Largest loan a member can take for their contribution.

    Args:
        contribution_total: Cumulative member savings (non-negative)
        settings: Lending settings (uses defaults if not provided)

    Returns:
        contribution_total multiplied by the tier's loan multiplier
    """
    contribution = require_non_negative("contribution_total", contribution_total)
    tier = classify_tier(contribution, settings)
    return contribution * get_tier_policy(tier, settings).max_loan_multiplier


def check_loan_eligibility(
    contribution_total: Amount,
    requested_amount: Amount,
    has_active_loan: bool,
    settings: LendingSettings = lending_settings,
) -> EligibilityResult:
    """
    Decide whether a member may apply for a loan of the requested size.

    Rules, first failure wins:
        1. No other active loan (one loan per member at a time)
        2. Contribution at or above the Basic minimum
        3. Requested amount within the tier's loan ceiling

    Args:
        contribution_total: Cumulative member savings
        requested_amount: Loan amount asked for
        has_active_loan: Whether the member still owes on a loan
        settings: Lending settings (uses defaults if not provided)

    Returns:
        EligibilityResult; ineligibility is reported, never raised
    """
    contribution = require_non_negative("contribution_total", contribution_total)
    requested = require_non_negative("requested_amount", requested_amount)

    if has_active_loan:
        return EligibilityResult(
            eligible=False,
            reason=EligibilityReason.ACTIVE_LOAN,
            message="You have an active loan. Please repay before applying again.",
        )

    if contribution < settings.basic_min_contribution:
        return EligibilityResult(
            eligible=False,
            reason=EligibilityReason.INSUFFICIENT_CONTRIBUTION,
            message=(
                f"Minimum contribution of "
                f"{format_naira(settings.basic_min_contribution)} required"
            ),
        )

    max_loan = max_loan_amount(contribution, settings)
    if requested > max_loan:
        return EligibilityResult(
            eligible=False,
            reason=EligibilityReason.EXCEEDS_TIER_LIMIT,
            message=f"Maximum loan amount for your tier is {format_naira(max_loan)}",
        )

    return EligibilityResult(eligible=True)
