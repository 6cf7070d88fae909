"""
Tier Classification for the cooperative lending engine.

Members are Basic or Premium depending on how much they have saved. The tier
drives the loan multiplier, the interest rate and the longest repayment
period. Two tiers is fixed cooperative policy; adding a third means
revisiting the threshold table, not just the settings.
"""

from typing import List

from .models import MembershipTier, TierPolicy
from .money import Amount, require_non_negative
from .settings import LendingSettings, lending_settings

BASIC_BENEFITS = (
    "Access to cooperative loans",
    "{multiplier}x contribution loan limit",
    "Monthly interest rate: {rate}%",
    "{duration}-month maximum repayment period",
    "Group savings benefits",
)

PREMIUM_BENEFITS = (
    "Access to cooperative loans",
    "{multiplier}x contribution loan limit",
    "Monthly interest rate: {rate}%",
    "{duration}-month maximum repayment period",
    "Priority loan processing",
    "Export aggregation priority slots",
    "Group savings benefits",
)


def _format_rate(rate: float) -> str:
    return f"{rate:g}"


def classify_tier(
    contribution_total: Amount,
    settings: LendingSettings = lending_settings,
) -> MembershipTier:
    """
    Map a cumulative contribution total to a membership tier.

    Args:
        contribution_total: Cumulative member savings (non-negative)
        settings: Lending settings (uses defaults if not provided)

    Returns:
        PREMIUM at or above the Premium minimum, BASIC otherwise

    Raises:
        InvalidAmountException: If contribution_total is negative
    """
    contribution = require_non_negative("contribution_total", contribution_total)

    if contribution >= settings.premium_min_contribution:
        return MembershipTier.PREMIUM
    return MembershipTier.BASIC


def get_tier_policy(
    tier: MembershipTier,
    settings: LendingSettings = lending_settings,
) -> TierPolicy:
    """Build the full policy for a tier from settings."""
    if tier == MembershipTier.PREMIUM:
        multiplier = settings.premium_loan_multiplier
        rate = settings.premium_interest_rate
        duration = settings.premium_max_duration_months
        return TierPolicy(
            tier=tier,
            min_contribution=settings.premium_min_contribution,
            max_loan_multiplier=multiplier,
            monthly_interest_rate=rate,
            max_duration_months=duration,
            benefits=tuple(
                b.format(multiplier=multiplier, rate=_format_rate(rate), duration=duration)
                for b in PREMIUM_BENEFITS
            ),
            color="emerald",
        )

    multiplier = settings.basic_loan_multiplier
    rate = settings.basic_interest_rate
    duration = settings.basic_max_duration_months
    return TierPolicy(
        tier=MembershipTier.BASIC,
        min_contribution=settings.basic_min_contribution,
        max_loan_multiplier=multiplier,
        monthly_interest_rate=rate,
        max_duration_months=duration,
        benefits=tuple(
            b.format(multiplier=multiplier, rate=_format_rate(rate), duration=duration)
            for b in BASIC_BENEFITS
        ),
        color="blue",
    )


def list_tier_policies(
    settings: LendingSettings = lending_settings,
) -> List[TierPolicy]:
    """All tier policies, lower tier first."""
    return [get_tier_policy(tier, settings) for tier in MembershipTier]


def get_tier_interest_rate(
    tier: MembershipTier,
    settings: LendingSettings = lending_settings,
) -> float:
    return get_tier_policy(tier, settings).monthly_interest_rate


def get_tier_max_duration(
    tier: MembershipTier,
    settings: LendingSettings = lending_settings,
) -> int:
    return get_tier_policy(tier, settings).max_duration_months
