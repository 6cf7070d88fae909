"""Lending service - the use cases the cooperative app calls into."""

from decimal import Decimal
from typing import List

import structlog

from coop_lending.application.dto import (
    EligibilityRequest,
    EligibilityResponse,
    LoanQuoteRequest,
    PenaltyRequest,
    RepaymentRequest,
)
from coop_lending.service.lending import (
    Clock,
    CreditCheck,
    LendingSettings,
    LoanCostSummary,
    LoanQuote,
    PenaltyResult,
    RepaymentOutcome,
    TierPolicy,
    apply_repayment,
    calculate_loan_cost,
    calculate_penalty,
    check_credit_eligibility,
    check_loan_eligibility,
    classify_tier,
    get_tier_policy,
    lending_settings,
    list_tier_policies,
    max_loan_amount,
    quote_loan_application,
    system_clock,
)

logger = structlog.get_logger(__name__)


class LendingService:
    """
    Application service for cooperative lending use cases.

    Wraps the calculators with logging. Holds no state beyond its clock and
    settings; members' balances and loans are supplied on every call by the
    caller, which also persists whatever it needs from the results.
    """

    def __init__(
        self,
        clock: Clock = system_clock,
        settings: LendingSettings = lending_settings,
    ):
        self._clock = clock
        self._settings = settings

    def list_tiers(self) -> List[TierPolicy]:
        return list_tier_policies(self._settings)

    def classify(self, contribution_total: Decimal) -> TierPolicy:
        """Tier policy that applies to a contribution total."""
        tier = classify_tier(contribution_total, self._settings)
        return get_tier_policy(tier, self._settings)

    def max_loan_amount(self, contribution_total: Decimal) -> Decimal:
        return max_loan_amount(contribution_total, self._settings)

    def check_eligibility(self, request: EligibilityRequest) -> EligibilityResponse:
        """
        Check whether a member may apply for a loan.

        Args:
            request: Contribution, requested amount and active-loan flag

        Returns:
            EligibilityResponse with tier and loan ceiling

        Raises:
            InvalidAmountException: If an amount is negative
        """
        log = logger.bind(
            member_id=request.member_id,
            contribution_total=request.contribution_total,
            requested_amount=request.requested_amount,
        )

        result = check_loan_eligibility(
            request.contribution_total,
            request.requested_amount,
            request.has_active_loan,
            self._settings,
        )
        policy = self.classify(request.contribution_total)
        ceiling = max_loan_amount(request.contribution_total, self._settings)

        log.info(
            "eligibility_checked",
            eligible=result.eligible,
            reason=result.reason.value if result.reason else None,
            tier=policy.tier.value,
        )

        return EligibilityResponse.from_result(result, policy, ceiling)

    def check_credit(
        self,
        savings_balance: Decimal,
        loan_balance: Decimal,
        amount: Decimal,
    ) -> CreditCheck:
        check = check_credit_eligibility(
            savings_balance, loan_balance, amount, self._settings
        )
        logger.info(
            "credit_checked",
            eligible=check.eligible,
            available_credit=str(check.available_credit),
        )
        return check

    def quote_loan(self, request: LoanQuoteRequest) -> LoanQuote:
        """
        Price a loan application at the member's tier.

        Raises:
            InvalidAmountException: If the contribution is negative
            InvalidLoanTermsException: If amount or duration are invalid
        """
        log = logger.bind(
            member_id=request.member_id,
            amount=request.amount,
            duration_months=request.duration_months,
        )

        quote = quote_loan_application(
            contribution_total=request.contribution_total,
            amount=request.amount,
            duration_months=request.duration_months,
            has_active_loan=request.has_active_loan,
            claimed_tier=request.claimed_tier,
            start_date=request.start_date or self._clock.now().date(),
            settings=self._settings,
        )

        if quote.approved:
            log.info(
                "loan_quoted",
                tier=quote.tier.value,
                interest_rate=quote.interest_rate,
                total_repayment=str(quote.cost.total_repayment),
            )
        else:
            log.info(
                "loan_quote_declined",
                tier=quote.tier.value,
                reason=quote.reason.value,
            )

        return quote

    def loan_cost(
        self,
        principal: Decimal,
        monthly_interest_rate: Decimal,
        duration_months: int,
    ) -> LoanCostSummary:
        return calculate_loan_cost(
            principal, monthly_interest_rate, duration_months, self._settings
        )

    def assess_penalty(self, request: PenaltyRequest) -> PenaltyResult:
        """Penalty owed on an installment as of now."""
        result = calculate_penalty(
            request.due_date,
            request.total_amount,
            clock=self._clock,
            settings=self._settings,
        )

        logger.info(
            "penalty_calculated",
            member_id=request.member_id,
            due_date=request.due_date.isoformat(),
            penalty=result.penalty,
            days_overdue=result.days_overdue,
        )

        return result

    def record_repayment(self, request: RepaymentRequest) -> RepaymentOutcome:
        """
        Work out an installment's new state after a verified payment.

        The payment itself has already been verified by the payment provider
        integration; only its amount is used here.
        """
        outcome = apply_repayment(
            installment_total=request.installment_total,
            paid_amount=request.paid_amount,
            payment_amount=request.payment_amount,
            due_date=request.due_date,
            clock=self._clock,
            settings=self._settings,
        )

        logger.info(
            "repayment_applied",
            member_id=request.member_id,
            payment_reference=request.payment_reference,
            status=outcome.status.value,
            penalty=outcome.penalty,
            balance_remaining=str(outcome.balance_remaining),
        )

        return outcome
