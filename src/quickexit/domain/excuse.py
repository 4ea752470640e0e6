"""Excuse domain entities."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class Category(StrEnum):
    """Situational reason behind an excuse."""

    WORK = "work"
    FAMILY = "family"
    HEALTH = "health"
    TRANSPORT = "transport"


class Tone(StrEnum):
    """Register the excuse text is written in."""

    FRIENDLY = "friendly"
    URGENT = "urgent"
    SUBTLE = "subtle"


class ExcuseSource(StrEnum):
    """Provenance of generated excuse text."""

    AI = "ai"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class Excuse:
    """A generated excuse kept in the recent-excuses store."""

    id: str
    category: str
    tone: str
    content: str
    created_at: datetime


@dataclass(frozen=True)
class GenerationResult:
    """Normalized output of a single excuse generation."""

    excuse: str
    believability: int
    source: ExcuseSource
