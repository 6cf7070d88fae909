"""
Cooperative Purchase Credit.

Members can pay for marketplace purchases against their savings. Half of the
savings balance (by default) is usable, less whatever loan is outstanding.
"""

from decimal import Decimal

from .models import CreditCheck
from .money import Amount, require_non_negative, to_decimal
from .settings import LendingSettings, lending_settings


def calculate_available_credit(
    savings_balance: Amount,
    loan_balance: Amount,
    settings: LendingSettings = lending_settings,
) -> Decimal:
    """
    Purchase credit available to a member, never below zero.

    Args:
        savings_balance: Member's savings balance
        loan_balance: Outstanding loan balance
        settings: Lending settings (uses defaults if not provided)
    """
    savings = require_non_negative("savings_balance", savings_balance)
    owed = require_non_negative("loan_balance", loan_balance)

    available = savings * to_decimal(settings.credit_savings_ratio) - owed
    return max(Decimal(0), available)


def check_credit_eligibility(
    savings_balance: Amount,
    loan_balance: Amount,
    amount: Amount,
    settings: LendingSettings = lending_settings,
) -> CreditCheck:
    """Whether a purchase of `amount` fits within the member's available credit."""
    purchase = require_non_negative("amount", amount)
    available = calculate_available_credit(savings_balance, loan_balance, settings)

    return CreditCheck(eligible=available >= purchase, available_credit=available)
