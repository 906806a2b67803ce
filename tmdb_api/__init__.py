"""Typed asynchronous client for The Movie Database (TMDB) v3 API."""

from .core import (
    Client,
    Command,
    ConfigurationError,
    Executor,
    ExecutorResponse,
    HttpxExecutor,
    RequestError,
    ResponseError,
    ServerError,
    ServerValidationError,
    TMDBError,
)

__version__ = "0.1.0"

__all__ = [
    "Client",
    "Command",
    "ConfigurationError",
    "Executor",
    "ExecutorResponse",
    "HttpxExecutor",
    "RequestError",
    "ResponseError",
    "ServerError",
    "ServerValidationError",
    "TMDBError",
    "__version__",
]
