import logging

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class TMDBError(Exception):
    """Base error class for everything raised by the client."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


class ConfigurationError(TMDBError):
    """The client cannot be built from the given configuration."""


class RequestError(TMDBError):
    """The HTTP request could not be sent or no response was received."""

    def __init__(self, detail: str, url: str | None = None):
        self.url = url
        super().__init__(detail)


class ResponseError(TMDBError):
    """A response body could not be decoded into the expected shape."""

    def __init__(
        self, detail: str, http_status: int, body_snippet: str | None = None
    ):
        self.http_status = http_status
        self.body_snippet = body_snippet
        super().__init__(detail)


class ServerError(TMDBError):
    """The API answered with its error envelope.

    ``status_code`` is the TMDB code (7 for an invalid API key, 34 for a
    missing resource), ``http_status`` the HTTP status of the response.
    """

    def __init__(self, http_status: int, status_code: int, status_message: str):
        self.http_status = http_status
        self.status_code = status_code
        self.status_message = status_message
        super().__init__(f"HTTP {http_status} [{status_code}] {status_message}")


class ServerValidationError(TMDBError):
    """The API rejected the request parameters (HTTP 422)."""

    def __init__(self, http_status: int, errors: list[str]):
        self.http_status = http_status
        self.errors = errors
        super().__init__("; ".join(errors) or "Input validation failed")


# Wire shapes of the two error bodies
class ServerErrorBody(BaseModel):
    status_code: int
    status_message: str
    success: bool = False


class ServerValidationErrorBody(BaseModel):
    errors: list[str]


def _snippet(content: bytes) -> str:
    return content[:400].decode("utf-8", errors="replace")


def error_from_response(http_status: int, content: bytes) -> TMDBError:
    """Build the error matching a non-successful response body."""
    try:
        if http_status == 422:
            body = ServerValidationErrorBody.model_validate_json(content)
            return ServerValidationError(http_status, body.errors)
        body = ServerErrorBody.model_validate_json(content)
    except ValueError as exc:
        logger.error("Failed to decode error body for HTTP %s: %s", http_status, exc)
        return ResponseError(
            f"Unexpected error body for HTTP {http_status}",
            http_status=http_status,
            body_snippet=_snippet(content),
        )
    return ServerError(http_status, body.status_code, body.status_message)
