from .client import Client
from .command import Command
from .exceptions import (
    ConfigurationError,
    RequestError,
    ResponseError,
    ServerError,
    ServerValidationError,
    TMDBError,
)
from .executor import Executor, ExecutorResponse, HttpxExecutor
from .settings import Settings, get_settings

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
    "Settings",
    "TMDBError",
    "get_settings",
]
