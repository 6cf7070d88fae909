"""
Repayment Application for the cooperative lending engine.

Works out what happens to an installment when a member pays against it: any
overdue penalty is added to what is owed, and the installment moves to
paid, partial, overdue or stays pending.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Iterable, Union

from .clock import Clock, as_utc, system_clock
from .models import InstallmentStatus, RepaymentOutcome
from .money import Amount, require_non_negative
from .penalty import calculate_penalty
from .settings import LendingSettings, lending_settings


def apply_repayment(
    installment_total: Amount,
    paid_amount: Amount,
    payment_amount: Amount,
    due_date: Union[date, datetime],
    clock: Clock = system_clock,
    settings: LendingSettings = lending_settings,
) -> RepaymentOutcome:
    """
    Record a payment against an installment.

    Status rules:
        - paid:    cumulative payments cover installment + penalty
        - partial: something has been paid, but not enough
        - overdue: nothing paid and the due date has passed
        - pending: nothing paid and not yet due

    Args:
        installment_total: Installment amount (principal + interest)
        paid_amount: Amount already paid before this payment
        payment_amount: Verified amount of this payment
        due_date: When the installment fell due
        clock: Source of the current time (wall clock if not provided)
        settings: Lending settings (uses defaults if not provided)

    Returns:
        RepaymentOutcome describing the installment after the payment
    """
    total = require_non_negative("installment_total", installment_total)
    already_paid = require_non_negative("paid_amount", paid_amount)
    payment = require_non_negative("payment_amount", payment_amount)

    now = as_utc(clock.now())
    result = calculate_penalty(due_date, total, clock=clock, settings=settings)

    total_due = total + result.penalty
    new_paid = already_paid + payment

    if new_paid >= total_due:
        status = InstallmentStatus.PAID
    elif new_paid > 0:
        status = InstallmentStatus.PARTIAL
    elif now > as_utc(due_date):
        status = InstallmentStatus.OVERDUE
    else:
        status = InstallmentStatus.PENDING

    penalty_paid = min(payment, Decimal(result.penalty)) if result.penalty > 0 else Decimal(0)

    return RepaymentOutcome(
        status=status,
        penalty=result.penalty,
        days_overdue=result.days_overdue,
        total_due=total_due,
        paid_amount=new_paid,
        penalty_paid=penalty_paid,
        balance_remaining=max(Decimal(0), total_due - new_paid),
    )


def is_loan_repaid(statuses: Iterable[InstallmentStatus]) -> bool:
    """A loan is repaid once every installment is paid; an empty schedule is not."""
    statuses = [InstallmentStatus(s) for s in statuses]
    return bool(statuses) and all(s == InstallmentStatus.PAID for s in statuses)
