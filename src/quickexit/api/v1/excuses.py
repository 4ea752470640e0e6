"""Excuse API endpoints."""

import logging

from fastapi import APIRouter, HTTPException, Query

from quickexit.api.dependencies import ExcuseGeneratorDep, ExcuseStoreDep
from quickexit.api.v1.schemas import (
    EmergencyExcuseRequest,
    EmergencyExcuseResponse,
    ExcuseRecordResponse,
    ExcuseResponse,
    FakeContact,
    GenerateExcuseRequest,
)
from quickexit.config import get_settings
from quickexit.domain.excuse import Category, Tone

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(prefix="/excuses", tags=["excuses"])

EMERGENCY_CATEGORY = Category.FAMILY
EMERGENCY_TONE = Tone.URGENT
EMERGENCY_CONTACT = FakeContact(name="Sarah Johnson", relationship="Sister")


@router.post("/generate", response_model=ExcuseResponse)
async def generate_excuse(
    request: GenerateExcuseRequest,
    generator: ExcuseGeneratorDep,
    store: ExcuseStoreDep,
) -> ExcuseResponse:
    """Generate an excuse and record it in the recent list."""
    try:
        result = await generator.generate(request.category, request.tone)
        excuse = store.create_excuse(request.category, request.tone, result.excuse)
    except Exception as e:
        logger.error(f"Error generating excuse: {e}")
        raise HTTPException(
            status_code=500, detail="Failed to generate excuse. Please try again."
        ) from e

    return ExcuseResponse(
        id=excuse.id,
        category=excuse.category,
        tone=excuse.tone,
        content=excuse.content,
        created_at=excuse.created_at,
        believability=result.believability,
        source=result.source,
    )


@router.get("/recent", response_model=list[ExcuseRecordResponse])
async def list_recent_excuses(
    store: ExcuseStoreDep,
    limit: int = Query(settings.recent_excuses_default_limit, ge=1, le=100),
) -> list[ExcuseRecordResponse]:
    """List the most recently generated excuses, newest first."""
    return [ExcuseRecordResponse.model_validate(e) for e in store.get_recent(limit)]


@router.post("/emergency", response_model=EmergencyExcuseResponse)
async def emergency_excuse(
    generator: ExcuseGeneratorDep,
    store: ExcuseStoreDep,
    request: EmergencyExcuseRequest | None = None,
) -> EmergencyExcuseResponse:
    """Generate an urgent family excuse plus details for a fake incoming call."""
    call_type = request.call_type if request else "audio"

    try:
        result = await generator.generate(EMERGENCY_CATEGORY, EMERGENCY_TONE)
        excuse = store.create_excuse(EMERGENCY_CATEGORY, EMERGENCY_TONE, result.excuse)
    except Exception as e:
        logger.error(f"Error generating emergency excuse: {e}")
        raise HTTPException(
            status_code=500, detail="Emergency excuse generation failed"
        ) from e

    logger.info(f"Emergency {call_type} call prepared for excuse {excuse.id}")
    return EmergencyExcuseResponse(
        id=excuse.id,
        category=excuse.category,
        tone=excuse.tone,
        content=excuse.content,
        created_at=excuse.created_at,
        believability=result.believability,
        source=result.source,
        call_type=call_type,
        fake_contact=EMERGENCY_CONTACT,
    )
