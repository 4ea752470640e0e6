"""API v1 router aggregator."""

from fastapi import APIRouter

from quickexit.api.v1.excuses import router as excuses_router

router = APIRouter(prefix="/api/v1")
router.include_router(excuses_router)
