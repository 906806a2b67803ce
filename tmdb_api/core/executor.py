import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

import httpx

from .exceptions import RequestError

logger = logging.getLogger(__name__)

Params = list[tuple[str, str]]


@dataclass
class ExecutorResponse:
    status_code: int
    content: bytes
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class Executor(ABC):
    """HTTP transport used by the client to send command requests."""

    @abstractmethod
    async def get(
        self,
        url: str,
        params: Params | None = None,
        headers: dict[str, str] | None = None,
    ) -> ExecutorResponse: ...

    async def close(self) -> None:
        return None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


class HttpxExecutor(Executor):
    def __init__(
        self,
        headers: dict[str, str] | None = None,
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.default_headers = {
            "Accept": "application/json",
            "User-Agent": "tmdb-api-python/1.0",
            **(headers or {}),
        }
        self.timeout = timeout

        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    async def close(self) -> None:
        if hasattr(self, "_client"):
            await self._client.aclose()

    async def get(
        self,
        url: str,
        params: Params | None = None,
        headers: dict[str, str] | None = None,
    ) -> ExecutorResponse:
        request_headers = {**self.default_headers, **(headers or {})}

        try:
            response = await self._client.get(
                url, params=params or [], headers=request_headers
            )
        except httpx.HTTPError as e:
            logger.warning("Network error on GET %s: %s", url, e)
            raise RequestError(f"Request to {url} failed: {e}", url=url) from e

        return ExecutorResponse(
            status_code=response.status_code,
            content=response.content,
            headers=dict(response.headers),
        )
