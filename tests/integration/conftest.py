"""
Fixtures for integration tests.

Provides:
- Test client for the FastAPI app
- A fixed clock so penalty and schedule results do not depend on today
"""

from datetime import datetime, timezone
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from coop_lending.main import app
from coop_lending.core.dependencies import get_clock
from coop_lending.service.lending import FixedClock


NOW = datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock stopped at noon UTC on 2025-06-15."""
    return FixedClock(NOW)


@pytest_asyncio.fixture
async def client(fixed_clock: FixedClock) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with the clock dependency overridden."""
    app.dependency_overrides[get_clock] = lambda: fixed_clock

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def basic_member_request() -> dict:
    """Basic member asking for more than twice their savings."""
    return {
        "member_id": "member_basic",
        "contribution_total": 15000,
        "requested_amount": 40000,
        "has_active_loan": False,
    }


@pytest.fixture
def premium_quote_request() -> dict:
    """Premium member applying for a 3-month loan disbursed on Jan 31."""
    return {
        "member_id": "member_premium",
        "contribution_total": 20000,
        "amount": 30000,
        "duration_months": 3,
        "has_active_loan": False,
        "claimed_tier": "Premium",
        "start_date": "2025-01-31",
    }
