from fastapi import APIRouter

from .health import health_router
from .tiers import tier_router
from .loans import loan_router
from .penalties import penalty_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(tier_router, tags=["Tiers"])
router.include_router(loan_router, tags=["Loans"])
router.include_router(penalty_router, tags=["Penalties"])
