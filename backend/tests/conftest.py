import pytest
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional, Tuple
from httpx import ASGITransport, AsyncClient

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from petition_api.main import app
from petition_api.core.config import Settings, get_settings
from petition_api.core.errors import DownstreamFailure
from petition_api.services.petition.service import PetitionService, get_petition_service
from petition_api.services.rate_limit import DailyRateLimiter, get_rate_limiter

TEST_API_KEY = "sk-test"


class FakeInvoker:
    """Stands in for the completion API and records every call."""

    def __init__(self, content: str = "탄원서\n\n존경하는 재판장님께", error: Optional[str] = None):
        self.content = content
        self.error = error
        self.calls: List[Tuple[str, str, str]] = []

    async def complete(self, api_key: str, system_prompt: str, user_prompt: str) -> str:
        self.calls.append((api_key, system_prompt, user_prompt))
        if self.error is not None:
            raise DownstreamFailure(self.error or None)
        return self.content


class FixedDay:
    """Mutable clock for day-rollover tests."""

    def __init__(self, day: date):
        self.day = day

    def __call__(self) -> date:
        return self.day


@pytest.fixture
def clock():
    return FixedDay(date(2024, 3, 1))


@pytest.fixture
def limiter(clock):
    return DailyRateLimiter(limit=3, today=clock)


@pytest.fixture
def invoker():
    return FakeInvoker()


@pytest.fixture
def test_settings():
    return Settings(_env_file=None, OPENAI_API_KEY=TEST_API_KEY)


@pytest.fixture
def overrides(limiter, invoker, test_settings):
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_rate_limiter] = lambda: limiter
    app.dependency_overrides[get_petition_service] = lambda: PetitionService(invoker)
    yield app.dependency_overrides
    app.dependency_overrides.clear()


@pytest.fixture
async def client(overrides):
    """Create test client for FastAPI app."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
