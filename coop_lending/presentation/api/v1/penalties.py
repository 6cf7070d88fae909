"""API endpoints for overdue penalties and repayments."""

from typing import Annotated

from fastapi import APIRouter, Depends

from coop_lending.application.dto import PenaltyRequest, RepaymentRequest
from coop_lending.application.services import LendingService
from coop_lending.core.dependencies import get_lending_service
from coop_lending.core.metrics import (
    record_penalty,
    record_repayment,
    track_calculation_latency,
)
from coop_lending.presentation.schemas import (
    ErrorResponseSchema,
    PenaltyRequestSchema,
    PenaltyResponseSchema,
    RepaymentRequestSchema,
    RepaymentResponseSchema,
)

penalty_router = APIRouter(
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid amounts"},
    },
)


@penalty_router.post(
    "/penalty",
    response_model=PenaltyResponseSchema,
    summary="Calculate Overdue Penalty",
    description="""
    Penalty owed on an installment as of now.

    No penalty accrues during the grace period; after it, a daily rate is
    charged on the installment amount and rounded to whole naira.
    """,
)
async def calculate_penalty(
    request: PenaltyRequestSchema,
    lending_service: Annotated[LendingService, Depends(get_lending_service)],
) -> PenaltyResponseSchema:
    dto = PenaltyRequest(
        due_date=request.due_date,
        total_amount=request.total_amount,
        member_id=request.member_id,
    )

    with track_calculation_latency("calculate_penalty"):
        result = lending_service.assess_penalty(dto)

    record_penalty(result.penalty)

    return PenaltyResponseSchema(
        penalty=result.penalty,
        days_overdue=result.days_overdue,
    )


@penalty_router.post(
    "/repayments",
    response_model=RepaymentResponseSchema,
    summary="Apply Repayment",
    description="New installment status, penalty and balance after a verified payment.",
)
async def apply_repayment(
    request: RepaymentRequestSchema,
    lending_service: Annotated[LendingService, Depends(get_lending_service)],
) -> RepaymentResponseSchema:
    dto = RepaymentRequest(
        installment_total=request.installment_total,
        paid_amount=request.paid_amount,
        payment_amount=request.payment_amount,
        due_date=request.due_date,
        member_id=request.member_id,
        payment_reference=request.payment_reference,
    )

    with track_calculation_latency("apply_repayment"):
        outcome = lending_service.record_repayment(dto)

    record_repayment(outcome.status.value)

    return RepaymentResponseSchema(
        status=outcome.status,
        penalty=outcome.penalty,
        days_overdue=outcome.days_overdue,
        total_due=outcome.total_due,
        paid_amount=outcome.paid_amount,
        penalty_paid=outcome.penalty_paid,
        balance_remaining=outcome.balance_remaining,
    )
