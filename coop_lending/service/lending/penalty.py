"""
Overdue Penalty Calculation for the cooperative lending engine.

Late installments accrue a daily penalty once a grace period has passed:

    days elapsed <= grace period  ->  no penalty, 0 days overdue
    days elapsed >  grace period  ->  days_overdue = elapsed - grace
                                      penalty = amount x daily rate x days_overdue

Elapsed days are whole days, truncated: 7 days and 23 hours late is still
7 days. With the default 7-day grace period and 0.1% daily rate, an
installment of 10,000 paid 12 days late carries a penalty of 50.

Nothing is stored; the penalty is recomputed from the clock on every call.
"""

from datetime import date, datetime, timedelta
from typing import Union

from .clock import Clock, as_utc, system_clock
from .models import PenaltyResult
from .money import Amount, require_non_negative, round_to_unit, to_decimal
from .settings import LendingSettings, lending_settings

ONE_DAY = timedelta(days=1)


def days_elapsed(due_date: Union[date, datetime], now: datetime) -> int:
    """Whole days from due_date to now, floored; negative before the due date."""
    return (as_utc(now) - as_utc(due_date)) // ONE_DAY


def calculate_penalty(
    due_date: Union[date, datetime],
    total_amount: Amount,
    clock: Clock = system_clock,
    settings: LendingSettings = lending_settings,
) -> PenaltyResult:
    """
    Compute the late-payment penalty on an installment.

    Args:
        due_date: When the installment fell due
        total_amount: Installment amount the penalty is charged on
        clock: Source of the current time (wall clock if not provided)
        settings: Lending settings (uses defaults if not provided)

    Returns:
        PenaltyResult with the penalty rounded half-up to a whole unit

    Raises:
        InvalidAmountException: If total_amount is negative
    """
    amount = require_non_negative("total_amount", total_amount)
    elapsed = days_elapsed(due_date, clock.now())

    if elapsed <= settings.grace_period_days:
        return PenaltyResult(penalty=0, days_overdue=0)

    days_overdue = elapsed - settings.grace_period_days
    penalty = amount * to_decimal(settings.daily_penalty_rate) * days_overdue

    return PenaltyResult(penalty=round_to_unit(penalty), days_overdue=days_overdue)
