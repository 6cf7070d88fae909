"""
Loan Cost Aggregation for the cooperative lending engine.

Summarizes what a loan will cost the member by building its schedule and
adding up the installments.

The totals are the sums of what the schedule actually charges. Interest is
rounded to kobo on each installment before summing, so for odd principals
total_interest can differ by a few kobo from the unrounded
principal x rate x duration (12,345 at 2.5% over 7 months: 7 x 308.63 =
2,160.41, not 2,160.375).

monthly_payment is total_repayment spread evenly over the term. Because the
last installment absorbs the principal rounding remainder, it may differ
from the last installment's total by that remainder (20,000 at 2.5% over 3
months: installments 7,166.67, 7,166.67, 7,166.66; monthly_payment
7,166.67).
"""

from datetime import date

from .models import LoanCostSummary
from .money import Amount, to_decimal, to_kobo
from .schedule import calculate_repayment_schedule
from .settings import LendingSettings, lending_settings

# Dates do not affect totals; any fixed start keeps the summary deterministic.
_COSTING_START_DATE = date(2000, 1, 1)


def calculate_loan_cost(
    principal: Amount,
    monthly_interest_rate: Amount,
    duration_months: int,
    settings: LendingSettings = lending_settings,
) -> LoanCostSummary:
    """
    Calculate total interest, total repayment and average monthly payment.

    Args:
        principal: Loan amount
        monthly_interest_rate: Flat monthly rate in percent
        duration_months: Number of monthly installments
        settings: Lending settings (uses defaults if not provided)

    Returns:
        LoanCostSummary where total_repayment == principal + total_interest
        and total_interest is the sum of the installments' kobo-rounded interest

    Raises:
        InvalidLoanTermsException: If the terms are not a valid loan
    """
    schedule = calculate_repayment_schedule(
        principal,
        monthly_interest_rate,
        duration_months,
        start_date=_COSTING_START_DATE,
        settings=settings,
    )

    amount = to_decimal(principal)
    total_interest = sum((inst.interest_amount for inst in schedule), start=to_decimal(0))
    total_repayment = amount + total_interest

    return LoanCostSummary(
        principal=amount,
        total_interest=total_interest,
        total_repayment=total_repayment,
        monthly_payment=to_kobo(total_repayment / duration_months),
    )
