"""
Integration tests for metrics tracking.

These tests verify:
1. Metrics endpoint returns valid Prometheus format
2. Business metrics (eligibility, quotes, penalties, repayments) are tracked
3. Technical metrics (calculation and HTTP latency) are recorded
"""

from typing import Optional

import pytest
from httpx import AsyncClient
from prometheus_client import REGISTRY


def sample(name: str, **labels) -> float:
    """Current value of a sample, treating a missing series as zero."""
    value: Optional[float] = REGISTRY.get_sample_value(name, labels)
    return value or 0.0


# =============================================================================
# Metrics Endpoint Tests
# =============================================================================

class TestMetricsEndpoint:
    """Tests for GET /metrics endpoint."""

    @pytest.mark.asyncio
    async def test_metrics_endpoint_returns_prometheus_format(
        self,
        client: AsyncClient,
    ):
        response = await client.get("/metrics")

        assert response.status_code == 200
        content_type = response.headers.get("content-type", "")
        assert "text/plain" in content_type
        assert "# HELP coop_eligibility_checks_total" in response.text

    @pytest.mark.asyncio
    async def test_metrics_requests_are_not_tracked(self, client: AsyncClient):
        before = sample(
            "coop_http_requests_total", method="GET", endpoint="/metrics", status="200"
        )

        await client.get("/metrics")

        after = sample(
            "coop_http_requests_total", method="GET", endpoint="/metrics", status="200"
        )
        assert after == before


# =============================================================================
# Business Metrics Tests
# =============================================================================

class TestBusinessMetrics:
    """Counters move by exactly one per calculation."""

    @pytest.mark.asyncio
    async def test_ineligible_check_counted_with_reason(
        self,
        client: AsyncClient,
        basic_member_request: dict,
    ):
        labels = {"outcome": "ineligible", "reason": "exceeds_tier_limit"}
        before = sample("coop_eligibility_checks_total", **labels)

        response = await client.post("/v1/eligibility", json=basic_member_request)
        assert response.status_code == 200

        assert sample("coop_eligibility_checks_total", **labels) == before + 1

    @pytest.mark.asyncio
    async def test_approved_quote_counted_by_tier(
        self,
        client: AsyncClient,
        premium_quote_request: dict,
    ):
        labels = {"tier": "Premium", "outcome": "approved"}
        before = sample("coop_loan_quotes_total", **labels)

        await client.post("/v1/loans/quote", json=premium_quote_request)

        assert sample("coop_loan_quotes_total", **labels) == before + 1

    @pytest.mark.asyncio
    async def test_penalty_within_grace_not_counted(self, client: AsyncClient):
        before = sample("coop_penalties_assessed_total")

        await client.post("/v1/penalty", json={
            "due_date": "2025-06-10T12:00:00Z",
            "total_amount": 10000,
        })

        assert sample("coop_penalties_assessed_total") == before

    @pytest.mark.asyncio
    async def test_penalty_observed(self, client: AsyncClient):
        count_before = sample("coop_penalty_amount_count")
        sum_before = sample("coop_penalty_amount_sum")

        await client.post("/v1/penalty", json={
            "due_date": "2025-06-03T12:00:00Z",
            "total_amount": 10000,
        })

        assert sample("coop_penalty_amount_count") == count_before + 1
        assert sample("coop_penalty_amount_sum") == sum_before + 50

    @pytest.mark.asyncio
    async def test_repayment_counted_by_status(self, client: AsyncClient):
        before = sample("coop_repayments_total", status="partial")

        await client.post("/v1/repayments", json={
            "installment_total": 10000,
            "payment_amount": 2500,
            "due_date": "2025-07-01",
        })

        assert sample("coop_repayments_total", status="partial") == before + 1


# =============================================================================
# Latency Metrics Tests
# =============================================================================

class TestLatencyMetrics:
    """Tests for latency tracking."""

    @pytest.mark.asyncio
    async def test_calculation_latency_tracked(self, client: AsyncClient):
        before = sample(
            "coop_calculation_latency_seconds_count", operation="loan_cost"
        )

        await client.post("/v1/loans/cost", json={
            "principal": 30000,
            "monthly_interest_rate": 2.5,
            "duration_months": 3,
        })

        after = sample("coop_calculation_latency_seconds_count", operation="loan_cost")
        assert after == before + 1

    @pytest.mark.asyncio
    async def test_http_request_labelled_by_route(self, client: AsyncClient):
        labels = {"method": "GET", "endpoint": "/v1/tiers", "status": "200"}
        before = sample("coop_http_requests_total", **labels)

        await client.get("/v1/tiers")

        assert sample("coop_http_requests_total", **labels) == before + 1
