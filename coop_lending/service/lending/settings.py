"""
Lending Settings for the cooperative savings and loan engine.

This module contains all configurable parameters for tiering, credit limits,
loan pricing and overdue penalties. They can be adjusted via environment
variables when the cooperative revises its policy.

Environment variables use the LENDING_ prefix:
    LENDING_PREMIUM_MIN_CONTRIBUTION=25000
    LENDING_GRACE_PERIOD_DAYS=10
    LENDING_DAILY_PENALTY_RATE=0.002

Usage:
    from coop_lending.service.lending.settings import lending_settings

    # Use default settings (loaded from env)
    grace = lending_settings.grace_period_days

    # Or create custom settings for testing
    custom = LendingSettings(grace_period_days=3)
"""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LendingSettings(BaseSettings):
    """
    Configurable parameters for the lending engine.

    All settings can be overridden via environment variables with LENDING_ prefix.
    All monetary values are in whole currency units (naira).
    Interest rates are monthly percentages (2.5 means 2.5% per month).
    """

    model_config = SettingsConfigDict(
        env_prefix="LENDING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # === Tier Thresholds ===
    basic_min_contribution: int = Field(
        default=10_000,
        ge=0,
        description="Minimum cumulative contribution to borrow at all (Basic tier)",
    )
    premium_min_contribution: int = Field(
        default=20_000,
        ge=0,
        description="Cumulative contribution at or above which Premium applies",
    )

    # === Loan Multipliers ===
    basic_loan_multiplier: int = Field(
        default=2,
        ge=1,
        description="Maximum loan as a multiple of contribution for Basic",
    )
    premium_loan_multiplier: int = Field(
        default=3,
        ge=1,
        description="Maximum loan as a multiple of contribution for Premium",
    )

    # === Pricing ===
    basic_interest_rate: float = Field(
        default=2.5,
        ge=0.0,
        description="Flat monthly interest rate for Basic, in percent",
    )
    premium_interest_rate: float = Field(
        default=2.0,
        ge=0.0,
        description="Flat monthly interest rate for Premium, in percent",
    )

    # === Durations ===
    basic_max_duration_months: int = Field(
        default=6,
        ge=1,
        description="Longest repayment period allowed for Basic",
    )
    premium_max_duration_months: int = Field(
        default=12,
        ge=1,
        description="Longest repayment period allowed for Premium",
    )
    max_loan_term_months: int = Field(
        default=120,
        ge=1,
        le=1200,
        description="Longest loan term any calculation accepts, whatever the tier",
    )

    # === Overdue Penalties ===
    grace_period_days: int = Field(
        default=7,
        ge=0,
        description="Days after the due date before any penalty accrues",
    )
    daily_penalty_rate: float = Field(
        default=0.001,
        ge=0.0,
        le=1.0,
        description="Fraction of the installment charged per day past grace (0.1%)",
    )

    # === Cooperative Credit ===
    credit_savings_ratio: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Share of savings usable as purchase credit",
    )

    @model_validator(mode="after")
    def validate_tier_thresholds(self) -> "LendingSettings":
        """Premium must start above Basic; tier durations fit the loan term cap."""
        if self.premium_min_contribution <= self.basic_min_contribution:
            raise ValueError(
                f"premium_min_contribution ({self.premium_min_contribution}) must be "
                f"greater than basic_min_contribution ({self.basic_min_contribution})"
            )
        longest_tier = max(self.basic_max_duration_months, self.premium_max_duration_months)
        if longest_tier > self.max_loan_term_months:
            raise ValueError(
                f"tier maximum duration ({longest_tier}) must not exceed "
                f"max_loan_term_months ({self.max_loan_term_months})"
            )
        return self


@lru_cache
def get_lending_settings() -> LendingSettings:
    """Get cached lending settings instance."""
    return LendingSettings()


lending_settings = get_lending_settings()
