"""
Repayment Schedule Generation for the cooperative lending engine.

Loans are repaid in equal monthly installments with flat-rate interest:
every installment carries interest on the ORIGINAL principal, not on the
outstanding balance. This is the cooperative's pricing policy and is kept
as-is; it costs members more than reducing-balance amortization would.

Due dates:
    Installment i falls i calendar months after the start date on the same
    day of the month. When that day does not exist in the target month the
    date is clamped to the month's last day (Jan 31 + 1 month = Feb 28, or
    Feb 29 in a leap year). Each due date is computed from the start date,
    not from the previous due date, so a clamp never carries forward
    (Jan 31 start -> Feb 28, Mar 31, Apr 30, ...).

Rounding:
    Principal and interest portions are quantized to kobo. The last
    installment absorbs the principal rounding remainder so principal
    portions always sum exactly to the loan principal. Interest is rounded
    per installment, so the schedule's interest is duration x the rounded
    monthly interest.

Terms:
    Durations above the configured maximum loan term are rejected before any
    installment is built.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional, Union

from dateutil.relativedelta import relativedelta

from coop_lending.domain.exceptions import InvalidLoanTermsException

from .models import RepaymentInstallment
from .money import Amount, to_decimal, to_kobo
from .settings import LendingSettings, lending_settings


def add_months(start: date, months: int) -> date:
    """Advance a date by whole calendar months, clamping to month end."""
    return start + relativedelta(months=months)


def validate_loan_terms(
    principal: Amount,
    monthly_interest_rate: Amount,
    duration_months: int,
    settings: LendingSettings = lending_settings,
) -> None:
    """
    Raise InvalidLoanTermsException for terms that cannot describe a loan.

    Principal must be positive, duration a whole number of months between
    one and the configured maximum loan term, and the rate non-negative.
    """
    if to_decimal(principal) <= 0:
        raise InvalidLoanTermsException(f"principal must be positive: {principal}")
    if isinstance(duration_months, bool) or not isinstance(duration_months, int):
        raise InvalidLoanTermsException(
            f"duration_months must be a whole number of months: {duration_months!r}"
        )
    if duration_months < 1:
        raise InvalidLoanTermsException(
            f"duration_months must be at least 1: {duration_months}"
        )
    if duration_months > settings.max_loan_term_months:
        raise InvalidLoanTermsException(
            f"duration_months must not exceed {settings.max_loan_term_months}: "
            f"{duration_months}"
        )
    if to_decimal(monthly_interest_rate) < 0:
        raise InvalidLoanTermsException(
            f"monthly_interest_rate must not be negative: {monthly_interest_rate}"
        )


def calculate_repayment_schedule(
    principal: Amount,
    monthly_interest_rate: Amount,
    duration_months: int,
    start_date: Optional[Union[date, datetime]] = None,
    settings: LendingSettings = lending_settings,
) -> List[RepaymentInstallment]:
    """
    Generate the full installment schedule for a loan.

    Args:
        principal: Loan amount
        monthly_interest_rate: Flat monthly rate in percent (2.5 = 2.5%)
        duration_months: Number of monthly installments
        start_date: Disbursement date (default: today)
        settings: Lending settings (uses defaults if not provided)

    Returns:
        Installments numbered 1..duration_months, all unpaid

    Raises:
        InvalidLoanTermsException: If the terms are not a valid loan

    Example:
        30,000 at 2.5% over 3 months ->
        3 x (10,000.00 principal + 750.00 interest) = 3 x 10,750.00
    """
    validate_loan_terms(principal, monthly_interest_rate, duration_months, settings)

    if start_date is None:
        start_date = date.today()
    elif isinstance(start_date, datetime):
        start_date = start_date.date()

    amount = to_decimal(principal)
    principal_portion = to_kobo(amount / duration_months)
    remainder = amount - principal_portion * duration_months
    interest_portion = to_kobo(amount * to_decimal(monthly_interest_rate) / Decimal(100))

    schedule = []
    for number in range(1, duration_months + 1):
        principal_amount = principal_portion
        if number == duration_months:
            principal_amount += remainder

        schedule.append(RepaymentInstallment(
            installment_number=number,
            due_date=add_months(start_date, number),
            principal_amount=principal_amount,
            interest_amount=interest_portion,
            total_amount=principal_amount + interest_portion,
            is_paid=False,
        ))

    return schedule
