"""
Unit Tests for repayment schedules and loan cost summaries.

These tests verify:
1. Installment count, numbering and unpaid initial state
2. Flat-rate interest on the original principal
3. Principal portions summing exactly to the loan amount
4. Month-end clamping of due dates
5. Cost totals and their identities
"""

from datetime import date, datetime
from decimal import Decimal

import pytest

from coop_lending.domain.exceptions import InvalidLoanTermsException
from coop_lending.service.lending.loan_cost import calculate_loan_cost
from coop_lending.service.lending.schedule import (
    add_months,
    calculate_repayment_schedule,
)
from coop_lending.service.lending.settings import LendingSettings


START = date(2025, 1, 15)


# =============================================================================
# Schedule Shape Tests
# =============================================================================

class TestScheduleShape:
    """Tests for the structure of calculate_repayment_schedule() output."""

    def test_three_month_loan_has_three_installments(self):
        schedule = calculate_repayment_schedule(30000, 2.5, 3, START)

        assert len(schedule) == 3
        assert [i.installment_number for i in schedule] == [1, 2, 3]

    def test_all_installments_start_unpaid(self):
        schedule = calculate_repayment_schedule(30000, 2.5, 3, START)

        assert all(not i.is_paid for i in schedule)

    def test_one_month_loan(self):
        schedule = calculate_repayment_schedule(10000, 2.5, 1, START)

        assert len(schedule) == 1
        assert schedule[0].principal_amount == Decimal("10000.00")
        assert schedule[0].due_date == date(2025, 2, 15)

    def test_due_dates_advance_by_calendar_month(self):
        schedule = calculate_repayment_schedule(12000, 2.5, 12, START)

        assert [i.due_date for i in schedule] == [
            add_months(START, n) for n in range(1, 13)
        ]
        assert schedule[-1].due_date == date(2026, 1, 15)

    def test_datetime_start_uses_its_date(self):
        schedule = calculate_repayment_schedule(
            30000, 2.5, 1, datetime(2025, 3, 10, 18, 30)
        )

        assert schedule[0].due_date == date(2025, 4, 10)

    def test_defaults_to_today(self):
        schedule = calculate_repayment_schedule(30000, 2.5, 1)

        assert schedule[0].due_date == add_months(date.today(), 1)


# =============================================================================
# Amount Tests
# =============================================================================

class TestScheduleAmounts:
    """Tests for principal and interest portions."""

    def test_worked_example(self):
        """30,000 at 2.5% over 3 months is 3 x (10,000 + 750)."""
        schedule = calculate_repayment_schedule(30000, 2.5, 3, START)

        for inst in schedule:
            assert inst.principal_amount == Decimal("10000.00")
            assert inst.interest_amount == Decimal("750.00")
            assert inst.total_amount == Decimal("10750.00")

    def test_interest_is_on_original_principal(self):
        """Flat-rate: the last installment carries the same interest as the first."""
        schedule = calculate_repayment_schedule(60000, 2.5, 12, START)

        assert schedule[0].interest_amount == schedule[11].interest_amount
        assert schedule[0].interest_amount == Decimal("1500.00")

    def test_principal_portions_sum_to_principal(self):
        schedule = calculate_repayment_schedule(12000, 2.5, 12, START)

        assert sum(i.principal_amount for i in schedule) == Decimal("12000")

    @pytest.mark.parametrize("principal,months", [
        (10000, 3),
        (20000, 3),
        (25000, 7),
        (99999, 11),
        (Decimal("15000.50"), 6),
    ])
    def test_uneven_division_is_exact_after_remainder(self, principal, months):
        schedule = calculate_repayment_schedule(principal, 2.0, months, START)

        assert sum(i.principal_amount for i in schedule) == Decimal(principal)
        first = schedule[0].principal_amount
        for inst in schedule[:-1]:
            assert inst.principal_amount == first
        assert abs(schedule[-1].principal_amount - first) < Decimal("0.01") * months

    def test_last_installment_absorbs_remainder(self):
        schedule = calculate_repayment_schedule(10000, 2.5, 3, START)

        assert [i.principal_amount for i in schedule] == [
            Decimal("3333.33"),
            Decimal("3333.33"),
            Decimal("3333.34"),
        ]

    def test_installments_equal_under_flat_rate(self):
        schedule = calculate_repayment_schedule(24000, 2.5, 6, START)

        assert len({i.total_amount for i in schedule}) == 1

    def test_zero_rate_loan_has_no_interest(self):
        schedule = calculate_repayment_schedule(6000, 0, 3, START)

        assert all(i.interest_amount == 0 for i in schedule)
        assert all(i.total_amount == Decimal("2000.00") for i in schedule)

    def test_longer_duration_costs_more_interest(self):
        short = calculate_repayment_schedule(50000, 2.5, 3, START)
        long = calculate_repayment_schedule(50000, 2.5, 12, START)

        assert sum(i.interest_amount for i in long) > sum(i.interest_amount for i in short)


# =============================================================================
# Month-End Tests
# =============================================================================

class TestMonthEndDueDates:
    """Due dates whose day does not exist in the target month."""

    def test_jan_31_clamps_to_end_of_february(self):
        assert add_months(date(2025, 1, 31), 1) == date(2025, 2, 28)

    def test_leap_year_february(self):
        assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)

    def test_clamp_does_not_carry_forward(self):
        schedule = calculate_repayment_schedule(40000, 2.0, 4, date(2025, 1, 31))

        assert [i.due_date for i in schedule] == [
            date(2025, 2, 28),
            date(2025, 3, 31),
            date(2025, 4, 30),
            date(2025, 5, 31),
        ]

    def test_year_rollover(self):
        schedule = calculate_repayment_schedule(30000, 2.0, 3, date(2025, 11, 30))

        assert [i.due_date for i in schedule] == [
            date(2025, 12, 30),
            date(2026, 1, 30),
            date(2026, 2, 28),
        ]


# =============================================================================
# Invalid Terms Tests
# =============================================================================

class TestInvalidTerms:
    """Preconditions on loan terms fail fast."""

    @pytest.mark.parametrize("principal", [0, -100])
    def test_non_positive_principal(self, principal):
        with pytest.raises(InvalidLoanTermsException) as exc_info:
            calculate_repayment_schedule(principal, 2.5, 3, START)

        assert exc_info.value.code == "INVALID_LOAN_TERMS"

    @pytest.mark.parametrize("months", [0, -1])
    def test_duration_below_one_month(self, months):
        with pytest.raises(InvalidLoanTermsException):
            calculate_repayment_schedule(10000, 2.5, months, START)

    def test_fractional_duration(self):
        with pytest.raises(InvalidLoanTermsException):
            calculate_repayment_schedule(10000, 2.5, 2.5, START)

    def test_negative_rate(self):
        with pytest.raises(InvalidLoanTermsException):
            calculate_repayment_schedule(10000, -1, 3, START)

    @pytest.mark.parametrize("months", [121, 100_000, 300_000])
    def test_duration_above_max_term(self, months):
        with pytest.raises(InvalidLoanTermsException) as exc_info:
            calculate_repayment_schedule(10000, 2.5, months, START)

        assert "must not exceed 120" in exc_info.value.message

    def test_max_term_is_accepted(self):
        schedule = calculate_repayment_schedule(120000, 2.0, 120, START)

        assert len(schedule) == 120
        assert schedule[-1].due_date == date(2035, 1, 15)

    def test_max_term_from_settings(self):
        settings = LendingSettings(max_loan_term_months=24)

        with pytest.raises(InvalidLoanTermsException):
            calculate_repayment_schedule(10000, 2.5, 25, START, settings)


# =============================================================================
# Loan Cost Tests
# =============================================================================

class TestLoanCost:
    """Tests for calculate_loan_cost()."""

    def test_worked_example(self):
        cost = calculate_loan_cost(30000, 2.5, 3)

        assert cost.principal == Decimal("30000")
        assert cost.total_interest == Decimal("2250.00")
        assert cost.total_repayment == Decimal("32250.00")
        assert cost.monthly_payment == Decimal("10750.00")

    @pytest.mark.parametrize("principal,rate,months", [
        (30000, 2.5, 3),
        (12345, 2.0, 7),
        (10000, 2.5, 3),
        (Decimal("99999.99"), 2.0, 12),
        (50000, 0, 6),
    ])
    def test_total_repayment_identity(self, principal, rate, months):
        cost = calculate_loan_cost(principal, rate, months)

        assert cost.total_repayment == cost.principal + cost.total_interest

    def test_total_interest_matches_schedule(self):
        schedule = calculate_repayment_schedule(45000, 2.0, 9, START)
        cost = calculate_loan_cost(45000, 2.0, 9)

        assert cost.total_interest == sum(i.interest_amount for i in schedule)

    def test_monthly_payment_equals_installment_total(self):
        cost = calculate_loan_cost(24000, 2.5, 6)
        schedule = calculate_repayment_schedule(24000, 2.5, 6, START)

        assert cost.monthly_payment == schedule[0].total_amount

    def test_idempotent(self):
        assert calculate_loan_cost(30000, 2.5, 3) == calculate_loan_cost(30000, 2.5, 3)

    def test_invalid_terms_propagate(self):
        with pytest.raises(InvalidLoanTermsException):
            calculate_loan_cost(30000, 2.5, 0)

    def test_over_long_term_is_rejected(self):
        with pytest.raises(InvalidLoanTermsException):
            calculate_loan_cost(1000000, 2, 100000)

    def test_interest_rounded_per_installment(self):
        cost = calculate_loan_cost(12345, 2.5, 7)

        # 7 x 308.63 rather than 12345 x 2.5% x 7 = 2160.375
        assert cost.total_interest == Decimal("2160.41")
        assert cost.total_repayment == Decimal("14505.41")

    def test_last_installment_may_differ_from_monthly_payment(self):
        cost = calculate_loan_cost(20000, 2.5, 3)
        schedule = calculate_repayment_schedule(20000, 2.5, 3, START)

        assert [i.total_amount for i in schedule] == [
            Decimal("7166.67"),
            Decimal("7166.67"),
            Decimal("7166.66"),
        ]
        assert cost.total_repayment == Decimal("21500.00")
        assert cost.monthly_payment == Decimal("7166.67")
