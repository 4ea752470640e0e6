"""In-memory store for recently generated excuses."""

import threading
import uuid
from collections.abc import Callable
from datetime import UTC, datetime

from quickexit.domain.excuse import Excuse

DEFAULT_RECENT_LIMIT = 10


def _utcnow() -> datetime:
    return datetime.now(UTC)


class RecentExcuseStore:
    """Process-lifetime registry of generated excuses.

    Records are never updated or removed, and the store has no capacity
    bound. Reads return the newest records first.
    """

    def __init__(self, clock: Callable[[], datetime] = _utcnow) -> None:
        """Initialize an empty store.

        Args:
            clock: Returns the timestamp assigned to new records.
        """
        self._clock = clock
        self._excuses: dict[str, Excuse] = {}
        self._lock = threading.Lock()

    def create_excuse(self, category: str, tone: str, content: str) -> Excuse:
        """Store a new excuse with a fresh id and the current timestamp."""
        excuse = Excuse(
            id=str(uuid.uuid4()),
            category=str(category),
            tone=str(tone),
            content=content,
            created_at=self._clock(),
        )
        with self._lock:
            self._excuses[excuse.id] = excuse
        return excuse

    def get_recent(self, limit: int = DEFAULT_RECENT_LIMIT) -> list[Excuse]:
        """Return up to ``limit`` excuses, most recently created first."""
        if limit < 1:
            return []
        with self._lock:
            excuses = list(self._excuses.values())
        # sorted() is stable, so equal timestamps keep insertion order
        excuses.sort(key=lambda e: e.created_at, reverse=True)
        return excuses[:limit]

    def get_by_id(self, excuse_id: str) -> Excuse | None:
        """Get an excuse by its id."""
        with self._lock:
            return self._excuses.get(excuse_id)

    def count(self) -> int:
        """Count stored excuses."""
        with self._lock:
            return len(self._excuses)
