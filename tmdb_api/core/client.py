from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from .command import Command
from .exceptions import ConfigurationError, ResponseError, error_from_response
from .executor import Executor, ExecutorResponse, HttpxExecutor
from .logging import (
    generate_request_id,
    get_structured_logger,
    reset_request_id,
    set_request_id,
)
from .settings import DEFAULT_BASE_URL, Settings, get_settings

logger = get_structured_logger(__name__)

OutputT = TypeVar("OutputT")


@lru_cache(maxsize=None)
def _adapter_for(output: Any) -> TypeAdapter:
    return TypeAdapter(output)


class Client:
    """Sends commands to the TMDB API.

    Authenticate with either a v3 API key, sent as the ``api_key`` query
    parameter, or a v4 read access token, sent as a bearer header. When both
    are given the client sends both.

        async with Client(api_key="...") as client:
            images = await MovieImages(movie_id=550).execute(client)
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        bearer_token: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        executor: Executor | None = None,
        timeout: float = 15.0,
    ):
        if not api_key and not bearer_token:
            raise ConfigurationError("An API key or a bearer token is required")
        if not base_url.startswith(("http://", "https://")):
            raise ConfigurationError(f"Base URL must be an http:// or https:// URL: {base_url!r}")

        self.api_key = api_key
        self.bearer_token = bearer_token
        self.base_url = base_url.rstrip("/")
        self.executor = executor or HttpxExecutor(timeout=timeout)

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None, executor: Executor | None = None
    ) -> "Client":
        if settings is None:
            try:
                settings = get_settings()
            except ValidationError as exc:
                raise ConfigurationError(f"Invalid TMDB settings: {exc}") from exc
        return cls(
            api_key=settings.TMDB_API_KEY,
            bearer_token=settings.TMDB_BEARER_TOKEN,
            base_url=settings.TMDB_BASE_URL,
            executor=executor,
            timeout=settings.TMDB_TIMEOUT_SECONDS,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        await self.executor.close()

    def _headers(self) -> dict[str, str]:
        if self.bearer_token:
            return {"Authorization": f"Bearer {self.bearer_token}"}
        return {}

    def _params(self, command: Command) -> list[tuple[str, str]]:
        params = command.params()
        if self.api_key:
            params.append(("api_key", self.api_key))
        return params

    async def execute(self, command: Command[OutputT]) -> OutputT:
        token = set_request_id(generate_request_id())
        try:
            path = command.path()
            logger.debug(
                "Executing TMDB command",
                command=type(command).__name__,
                path=path,
            )
            response = await self.executor.get(
                f"{self.base_url}{path}",
                params=self._params(command),
                headers=self._headers(),
            )
            return self._decode(command, response)
        finally:
            reset_request_id(token)

    def _decode(self, command: Command[OutputT], response: ExecutorResponse) -> OutputT:
        if not response.is_success:
            error = error_from_response(response.status_code, response.content)
            logger.warning(
                "TMDB command failed",
                command=type(command).__name__,
                http_status=response.status_code,
                error=str(error),
            )
            raise error

        try:
            return _adapter_for(command.output).validate_json(response.content)
        except ValidationError as exc:
            logger.error(
                "Failed to decode TMDB response",
                command=type(command).__name__,
                error=str(exc),
            )
            raise ResponseError(
                f"Unexpected response body for {type(command).__name__}: {exc}",
                http_status=response.status_code,
                body_snippet=response.content[:400].decode("utf-8", errors="replace"),
            ) from exc
