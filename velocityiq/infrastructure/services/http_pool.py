"""HTTP Connection Pool - shared async HTTP client for outbound API calls."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx

from velocityiq.domain.errors import UpstreamError

logger = logging.getLogger(__name__)

USER_AGENT = "VelocityIQ/0.1"


class HTTPPool:
    """Shared HTTP connection pool for async requests.

    Reuses connections across requests; closed on application shutdown.
    """

    _instance: "HTTPPool | None" = None
    _lock: asyncio.Lock | None = None

    def __init__(self) -> None:
        """Initialize HTTP pool (client created on first use)."""
        self._client: httpx.AsyncClient | None = None
        self._timeout = httpx.Timeout(30.0, connect=10.0)
        self._limits = httpx.Limits(
            max_keepalive_connections=10,
            max_connections=20,
            keepalive_expiry=30.0,
        )

    @classmethod
    async def get_instance(cls) -> "HTTPPool":
        """Get singleton instance (async-safe)."""
        if cls._lock is None:
            cls._lock = asyncio.Lock()

        async with cls._lock:
            if cls._instance is None:
                cls._instance = HTTPPool()
            return cls._instance

    async def get_client(self) -> httpx.AsyncClient:
        """Get or create the shared HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                limits=self._limits,
                follow_redirects=True,
                headers={"User-Agent": USER_AGENT},
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    @classmethod
    async def reset(cls) -> None:
        """Close and drop the singleton (shutdown and tests)."""
        if cls._instance:
            await cls._instance.close()
            cls._instance = None


@asynccontextmanager
async def get_http_client(client: httpx.AsyncClient | None = None) -> AsyncIterator[httpx.AsyncClient]:
    """Yield the given client, or the pooled one when None.

    Usage:
        async with get_http_client() as client:
            response = await client.get(url)
    """
    if client is not None:
        yield client
        return
    pool = await HTTPPool.get_instance()
    yield await pool.get_client()


async def get_json(
    url: str,
    *,
    service: str,
    params: dict | None = None,
    headers: dict | None = None,
    timeout: float | None = None,
    client: httpx.AsyncClient | None = None,
    error_label: str | None = None,
) -> object:
    """GET a JSON document; non-success status and transport failures raise UpstreamError.

    error_label names the endpoint in the error message, e.g.
    "SonarQube issues API error: 401".
    """
    label = error_label or f"{service} API"
    kwargs: dict = {"params": params, "headers": headers}
    if timeout:
        kwargs["timeout"] = timeout
    async with get_http_client(client) as http:
        try:
            response = await http.get(url, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("%s request failed: %s", service, e)
            raise UpstreamError(f"{label} request failed: {e}") from e

    if response.is_error:
        logger.warning("%s returned %s for %s", service, response.status_code, url)
        raise UpstreamError(f"{label} error: {response.status_code}", status_code=response.status_code)
    try:
        return response.json()
    except ValueError as e:
        raise UpstreamError(f"{label} returned invalid JSON") from e
