"""Base JSON API client: session lifecycle, request encoding and error translation."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import aiohttp
import orjson
import structlog

from config.constants import ProfileOperation
from config.settings import settings
from services.errors import TransportError

log = structlog.get_logger(__name__)


class HttpStatusError(Exception):
    """Raised for non-2xx responses. ``server_message`` is the body's ``error`` field, if any."""

    def __init__(self, status: int, server_message: str | None) -> None:
        self.status = status
        self.server_message = server_message
        super().__init__(server_message or f"HTTP {status}")


class MalformedBodyError(Exception):
    """Raised when a 2xx response body cannot be used."""


def extract_error_message(body: bytes) -> str | None:
    """Return the ``error`` field of a JSON object body, or None."""
    try:
        data = orjson.loads(body)
    except orjson.JSONDecodeError:
        return None
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, str) and error:
            return error
    return None


class BaseApiClient:
    """One lazily created session per client; every call is a single attempt."""

    def __init__(self, base_url: str | None = None, timeout: float | None = None) -> None:
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._session: aiohttp.ClientSession | None = None

    async def get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers={
                    "Content-Type": "application/json",
                    "User-Agent": "ProfileDesk/0.1",
                },
            )
        return self._session

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()

    async def _request(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
        expect_body: bool = True,
    ) -> Any:
        """Make one HTTP request and decode the JSON response body."""
        url = f"{self.base_url}{path}"
        data = orjson.dumps(payload) if payload is not None else None
        session = await self.get_session()

        async with session.request(method, url, data=data) as resp:
            body = await resp.read()
            if not 200 <= resp.status < 300:
                log.warning("http_error", method=method, url=url, status=resp.status)
                raise HttpStatusError(resp.status, extract_error_message(body))

        if not expect_body:
            return None
        try:
            return orjson.loads(body)
        except orjson.JSONDecodeError as e:
            raise MalformedBodyError(f"Response from {method} {url} is not JSON") from e

    @contextmanager
    def translate_errors(self, operation: ProfileOperation) -> Iterator[None]:
        """Turn any failure inside the block into a TransportError.

        Message precedence: server ``error`` field, then the transport's own
        message, then the operation's generic fallback.
        """
        try:
            yield
        except HttpStatusError as e:
            message = e.server_message or operation.fallback_message
            log.warning("request_failed", operation=operation.value, status=e.status, error=message)
            raise TransportError(message, operation, status=e.status) from e
        # Before ValueError: aiohttp.InvalidURL subclasses both.
        except (aiohttp.ClientError, TimeoutError) as e:
            message = str(e) or operation.fallback_message
            log.warning("transport_failed", operation=operation.value, error=message)
            raise TransportError(message, operation) from e
        except (MalformedBodyError, ValueError) as e:
            log.warning("malformed_response", operation=operation.value, error=str(e))
            raise TransportError(operation.fallback_message, operation) from e
