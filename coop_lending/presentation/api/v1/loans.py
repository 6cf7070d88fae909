"""API endpoints for loan eligibility, quotes and costs."""

from typing import Annotated

from fastapi import APIRouter, Depends

from coop_lending.application.dto import EligibilityRequest, LoanQuoteRequest
from coop_lending.application.services import LendingService
from coop_lending.core.dependencies import get_lending_service
from coop_lending.core.metrics import (
    record_eligibility,
    record_loan_quote,
    track_calculation_latency,
)
from coop_lending.presentation.schemas import (
    CreditCheckRequestSchema,
    CreditCheckResponseSchema,
    EligibilityRequestSchema,
    EligibilityResponseSchema,
    ErrorResponseSchema,
    InstallmentSchema,
    LoanCostRequestSchema,
    LoanCostSchema,
    LoanQuoteRequestSchema,
    LoanQuoteResponseSchema,
)

loan_router = APIRouter(
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid amounts or loan terms"},
    },
)


@loan_router.post(
    "/eligibility",
    response_model=EligibilityResponseSchema,
    summary="Check Loan Eligibility",
    description="""
    Check whether a member may apply for a loan of the requested size.

    Ineligible members get a 200 response with eligible=false and the code of
    the first rule that failed: active_loan, insufficient_contribution or
    exceeds_tier_limit.
    """,
)
async def check_eligibility(
    request: EligibilityRequestSchema,
    lending_service: Annotated[LendingService, Depends(get_lending_service)],
) -> EligibilityResponseSchema:
    dto = EligibilityRequest(
        contribution_total=request.contribution_total,
        requested_amount=request.requested_amount,
        has_active_loan=request.has_active_loan,
        member_id=request.member_id,
    )

    with track_calculation_latency("check_eligibility"):
        response = lending_service.check_eligibility(dto)

    record_eligibility(response.eligible, response.reason)

    return EligibilityResponseSchema(
        eligible=response.eligible,
        reason=response.reason,
        message=response.message,
        tier=response.tier,
        max_loan_amount=response.max_loan_amount,
    )


@loan_router.post(
    "/credit",
    response_model=CreditCheckResponseSchema,
    summary="Check Purchase Credit",
    description="Whether a marketplace purchase fits within the member's savings-backed credit.",
)
async def check_credit(
    request: CreditCheckRequestSchema,
    lending_service: Annotated[LendingService, Depends(get_lending_service)],
) -> CreditCheckResponseSchema:
    with track_calculation_latency("check_credit"):
        check = lending_service.check_credit(
            request.savings_balance,
            request.loan_balance,
            request.amount,
        )

    return CreditCheckResponseSchema(
        eligible=check.eligible,
        available_credit=check.available_credit,
    )


@loan_router.post(
    "/loans/quote",
    response_model=LoanQuoteResponseSchema,
    summary="Quote Loan Application",
    description="""
    Price a loan application at the member's tier rate.

    Approved quotes include the full monthly schedule and cost totals.
    Declined quotes carry the reason, including tier_mismatch and
    duration_exceeds_tier_limit.
    """,
)
async def quote_loan(
    request: LoanQuoteRequestSchema,
    lending_service: Annotated[LendingService, Depends(get_lending_service)],
) -> LoanQuoteResponseSchema:
    dto = LoanQuoteRequest(
        contribution_total=request.contribution_total,
        amount=request.amount,
        duration_months=request.duration_months,
        has_active_loan=request.has_active_loan,
        claimed_tier=request.claimed_tier,
        start_date=request.start_date,
        member_id=request.member_id,
    )

    with track_calculation_latency("quote_loan"):
        quote = lending_service.quote_loan(dto)

    record_loan_quote(quote.tier.value, quote.approved)

    return LoanQuoteResponseSchema(
        approved=quote.approved,
        tier=quote.tier,
        amount=quote.amount,
        duration_months=quote.duration_months,
        interest_rate=quote.interest_rate,
        reason=quote.reason.value if quote.reason else None,
        message=quote.message,
        cost=LoanCostSchema.from_summary(quote.cost) if quote.cost else None,
        schedule=[InstallmentSchema.from_installment(i) for i in quote.schedule],
    )


@loan_router.post(
    "/loans/cost",
    response_model=LoanCostSchema,
    summary="Calculate Loan Cost",
    description="Total interest, total repayment and monthly payment for explicit loan terms.",
)
async def loan_cost(
    request: LoanCostRequestSchema,
    lending_service: Annotated[LendingService, Depends(get_lending_service)],
) -> LoanCostSchema:
    with track_calculation_latency("loan_cost"):
        summary = lending_service.loan_cost(
            request.principal,
            request.monthly_interest_rate,
            request.duration_months,
        )

    return LoanCostSchema.from_summary(summary)
