"""Pytest configuration and fixtures."""

import random
from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from quickexit.main import create_app
from quickexit.repositories.excuse_repo import RecentExcuseStore
from quickexit.services.excuse_generator import ExcuseGenerator


class GateRandom(random.Random):
    """Seeded Random whose probability draws are pinned to one value.

    choice() and randint() still come from the seeded generator, so only
    the AI/fallback gate is forced.
    """

    def __init__(self, gate_value: float, seed: int = 1234) -> None:
        super().__init__(seed)
        self.gate_value = gate_value

    def random(self) -> float:
        return self.gate_value


def make_completion(content: str | None) -> MagicMock:
    """Build a fake chat completion carrying ``content``."""
    response = MagicMock()
    response.choices = [MagicMock()]
    response.choices[0].message.content = content
    return response


def make_openai_client(
    content: str | None = None, side_effect: Exception | None = None
) -> MagicMock:
    """Build a fake AsyncOpenAI client for chat completions."""
    client = MagicMock()
    if side_effect is not None:
        client.chat.completions.create = AsyncMock(side_effect=side_effect)
    else:
        client.chat.completions.create = AsyncMock(return_value=make_completion(content))
    return client


@pytest.fixture
def store() -> RecentExcuseStore:
    """Create an empty excuse store."""
    return RecentExcuseStore()


@pytest.fixture
def fallback_generator() -> ExcuseGenerator:
    """Generator with no provider credential configured."""
    return ExcuseGenerator(api_key="", rng=random.Random(42))


@pytest_asyncio.fixture
async def client(
    store: RecentExcuseStore, fallback_generator: ExcuseGenerator
) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client over a fresh app."""
    app = create_app(store=store, generator=fallback_generator)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
