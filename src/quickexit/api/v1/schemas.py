"""Pydantic schemas for API request/response models."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from quickexit.domain.excuse import Category, ExcuseSource, Tone

CallType = Literal["audio", "video"]


class CamelModel(BaseModel):
    """Base schema serialized with camelCase field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class GenerateExcuseRequest(CamelModel):
    """Request schema for excuse generation."""

    category: Category
    tone: Tone


class EmergencyExcuseRequest(CamelModel):
    """Request schema for the emergency shortcut."""

    call_type: CallType = "audio"


class ExcuseRecordResponse(CamelModel):
    """Response schema for a stored excuse."""

    id: str
    category: str
    tone: str
    content: str
    created_at: datetime


class ExcuseResponse(ExcuseRecordResponse):
    """Response schema for a freshly generated excuse."""

    believability: int = Field(ge=1, le=10)
    source: ExcuseSource


class FakeContact(CamelModel):
    """Caller identity shown by the simulated incoming call."""

    name: str
    relationship: str


class EmergencyExcuseResponse(ExcuseResponse):
    """Response schema for an emergency excuse with call details."""

    call_type: CallType
    fake_contact: FakeContact
