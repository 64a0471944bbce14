"""Shared test fixtures for Profile Desk test suite."""

import pytest
import orjson
from unittest.mock import AsyncMock, MagicMock

from models.profile import Profile


# ── aiohttp Session Mock ──


class FakeResponse:
    """Mimics aiohttp.ClientResponse: status plus a raw body."""

    def __init__(self, status: int = 200, json_body=None, raw_body: bytes | None = None):
        self.status = status
        if raw_body is not None:
            self._body = raw_body
        elif json_body is not None:
            self._body = orjson.dumps(json_body)
        else:
            self._body = b""

    async def read(self) -> bytes:
        return self._body


class FakeRequestContext:
    def __init__(self, response: FakeResponse | None, error: Exception | None):
        self.response = response
        self.error = error

    async def __aenter__(self):
        if self.error is not None:
            raise self.error
        return self.response

    async def __aexit__(self, *args):
        pass


class FakeSession:
    """Mock aiohttp.ClientSession that replays queued responses or errors."""

    def __init__(self):
        self.closed = False
        self.responses: list[FakeResponse | Exception] = []
        self.calls: list[tuple[str, str, dict | None]] = []

    def respond(self, status: int, json_body=None, raw_body: bytes | None = None) -> None:
        """Queue a response for the next request."""
        self.responses.append(FakeResponse(status, json_body, raw_body))

    def fail(self, error: Exception) -> None:
        """Make the next request raise ``error``."""
        self.responses.append(error)

    def request(self, method, url, data=None):
        self.calls.append((method, url, orjson.loads(data) if data else None))
        item = self.responses.pop(0) if self.responses else FakeResponse(200, [])
        if isinstance(item, Exception):
            return FakeRequestContext(None, item)
        return FakeRequestContext(item, None)

    async def close(self):
        self.closed = True


@pytest.fixture
def fake_session():
    """Provide a mock aiohttp session."""
    return FakeSession()


@pytest.fixture
def profile_client(fake_session):
    """ProfileClient wired to the fake session."""
    from services.profile_client import ProfileClient
    client = ProfileClient(base_url="http://backend.test/api")
    client._session = fake_session
    return client


# ── Client Mock ──


@pytest.fixture
def ann():
    return Profile(id="p1", first_name="Ann", last_name="Lee", age=30, interests=["reading", "chess"])


@pytest.fixture
def bob():
    return Profile(id="p2", first_name="Bob", last_name="Stone", age=45, interests=[])


@pytest.fixture
def mock_client(ann, bob):
    """Mock ProfileClient with all methods as AsyncMock."""
    client = MagicMock()
    client.list_profiles = AsyncMock(return_value=[ann, bob])
    client.create_profile = AsyncMock(return_value=ann)
    client.update_profile = AsyncMock(return_value=ann)
    client.delete_profile = AsyncMock(return_value=None)
    client.close = AsyncMock()
    return client


@pytest.fixture
def confirm_yes():
    return AsyncMock(return_value=True)


@pytest.fixture
def notices():
    """Collects every Notice the workflow emits."""
    return AsyncMock()


@pytest.fixture
def workflow(mock_client, confirm_yes, notices):
    from workflow.profile_workflow import ProfileWorkflow
    return ProfileWorkflow(mock_client, confirm=confirm_yes, on_notice=notices)
