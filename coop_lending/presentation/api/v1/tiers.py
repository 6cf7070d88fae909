"""API endpoints for membership tiers."""

from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from coop_lending.application.services import LendingService
from coop_lending.core.dependencies import get_lending_service
from coop_lending.core.metrics import track_calculation_latency
from coop_lending.presentation.schemas import (
    TierSchema,
    TierListResponseSchema,
    TierClassificationResponseSchema,
)

tier_router = APIRouter(prefix="/tiers")


@tier_router.get(
    "",
    response_model=TierListResponseSchema,
    summary="List Tiers",
    description="All membership tiers with their thresholds, pricing and benefits.",
)
async def list_tiers(
    lending_service: Annotated[LendingService, Depends(get_lending_service)],
) -> TierListResponseSchema:
    return TierListResponseSchema(
        tiers=[TierSchema.from_policy(p) for p in lending_service.list_tiers()],
    )


@tier_router.get(
    "/classify",
    response_model=TierClassificationResponseSchema,
    summary="Classify Contribution",
    description="Tier and loan ceiling for a cumulative contribution total.",
)
async def classify_contribution(
    contribution_total: Annotated[
        Decimal,
        Query(ge=0, description="Cumulative member savings in naira"),
    ],
    lending_service: Annotated[LendingService, Depends(get_lending_service)],
) -> TierClassificationResponseSchema:
    with track_calculation_latency("classify_tier"):
        policy = lending_service.classify(contribution_total)

    return TierClassificationResponseSchema(
        contribution_total=contribution_total,
        max_loan_amount=lending_service.max_loan_amount(contribution_total),
        policy=TierSchema.from_policy(policy),
    )
