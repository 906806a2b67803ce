import json
import logging

import httpx
import pytest

from helpers.fakes import (
    BASE_URL,
    INVALID_API_KEY,
    RESOURCE_NOT_FOUND,
    FakeExecutor,
    make_client,
)
from tmdb_api import (
    Client,
    ConfigurationError,
    ExecutorResponse,
    HttpxExecutor,
    RequestError,
    ResponseError,
    ServerError,
    ServerValidationError,
)
from tmdb_api.core.logging import get_request_id
from tmdb_api.core.settings import Settings
from tmdb_api.genre import MovieGenres
from tmdb_api.movie import MovieImages, MovieSearch

GENRES_RESPONSE = ExecutorResponse(status_code=200, content=b'{"genres": []}')


def test_client_requires_credentials():
    with pytest.raises(ConfigurationError):
        Client()
    with pytest.raises(ConfigurationError):
        Client(api_key="")


def test_client_strips_trailing_slash_from_base_url():
    client = Client(
        api_key="secret", base_url="http://tmdb.test/3/", executor=FakeExecutor()
    )
    assert client.base_url == "http://tmdb.test/3"


@pytest.mark.parametrize("base_url", ["not a url", "ftp://tmdb.test", ""])
def test_client_rejects_non_http_base_url(base_url):
    with pytest.raises(ConfigurationError):
        Client(api_key="secret", base_url=base_url, executor=FakeExecutor())


@pytest.mark.asyncio
async def test_api_key_is_appended_after_command_params():
    executor = FakeExecutor(GENRES_RESPONSE)
    client = Client(api_key="secret", base_url=BASE_URL, executor=executor)

    await client.execute(MovieGenres(language="de"))

    url, params, headers = executor.calls[0]
    assert url == "http://tmdb.test/genre/movie/list"
    assert params == [("language", "de"), ("api_key", "secret")]
    assert headers == {}


@pytest.mark.asyncio
async def test_bearer_token_is_sent_as_header():
    executor = FakeExecutor(GENRES_RESPONSE)
    client = Client(bearer_token="token", base_url=BASE_URL, executor=executor)

    await client.execute(MovieGenres())

    _, params, headers = executor.calls[0]
    assert params == []
    assert headers == {"Authorization": "Bearer token"}


@pytest.mark.asyncio
async def test_execute_over_httpx(server, client):
    server.respond({"genres": [{"id": 28, "name": "Action"}]})

    result = await MovieGenres().execute(client)

    request = server.last_request
    assert request.method == "GET"
    assert request.url.path == "/genre/movie/list"
    assert request.url.params["api_key"] == "secret"
    assert request.headers["accept"] == "application/json"
    assert result.genres[0].name == "Action"


@pytest.mark.asyncio
async def test_invalid_api_key(server, client):
    server.respond(INVALID_API_KEY, status_code=401)

    with pytest.raises(ServerError) as exc_info:
        await MovieImages(movie_id=42).execute(client)

    assert exc_info.value.http_status == 401
    assert exc_info.value.status_code == 7
    assert exc_info.value.status_message.startswith("Invalid API key")


@pytest.mark.asyncio
async def test_resource_not_found(server, client):
    server.respond(RESOURCE_NOT_FOUND, status_code=404)

    with pytest.raises(ServerError) as exc_info:
        await MovieImages(movie_id=42).execute(client)

    assert exc_info.value.http_status == 404
    assert exc_info.value.status_code == 34


@pytest.mark.asyncio
async def test_validation_error(server, client):
    server.respond({"errors": ["query must be provided"]}, status_code=422)

    with pytest.raises(ServerValidationError) as exc_info:
        await MovieSearch(query="x").execute(client)

    assert exc_info.value.errors == ["query must be provided"]
    assert "query must be provided" in str(exc_info.value)


@pytest.mark.asyncio
async def test_unexpected_error_body():
    executor = FakeExecutor(
        ExecutorResponse(status_code=502, content=b"<html>Bad Gateway</html>")
    )
    client = Client(api_key="secret", executor=executor)

    with pytest.raises(ResponseError) as exc_info:
        await client.execute(MovieGenres())

    assert exc_info.value.http_status == 502
    assert "Bad Gateway" in exc_info.value.body_snippet


@pytest.mark.asyncio
async def test_success_body_with_wrong_shape(server, client):
    server.respond({"id": 550, "posters": "nope"})

    with pytest.raises(ResponseError) as exc_info:
        await MovieImages(movie_id=550).execute(client)

    assert exc_info.value.http_status == 200


@pytest.mark.asyncio
async def test_transport_failure_becomes_request_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    executor = HttpxExecutor(transport=httpx.MockTransport(handler))
    async with Client(api_key="secret", base_url=BASE_URL, executor=executor) as client:
        with pytest.raises(RequestError) as exc_info:
            await MovieGenres().execute(client)

    assert exc_info.value.url == "http://tmdb.test/genre/movie/list"
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_context_manager_closes_executor():
    executor = FakeExecutor()
    async with Client(api_key="secret", executor=executor):
        pass
    assert executor.closed


@pytest.mark.asyncio
async def test_request_id_is_bound_only_during_execution(server):
    server.respond({"genres": []})
    client = make_client(server)
    seen = []

    class RecordingHandler(logging.Handler):
        def emit(self, record):
            seen.append(get_request_id())

    handler = RecordingHandler(level=logging.DEBUG)
    logger = logging.getLogger("tmdb_api.core.client")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        await MovieGenres().execute(client)
    finally:
        logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
        await client.close()

    assert seen and all(request_id for request_id in seen)
    assert get_request_id() is None


@pytest.mark.asyncio
async def test_api_key_is_not_logged(server, caplog):
    server.respond(INVALID_API_KEY, status_code=401)
    client = make_client(server, api_key="super-secret-key")

    with caplog.at_level(logging.DEBUG, logger="tmdb_api"):
        with pytest.raises(ServerError):
            await MovieGenres().execute(client)
    await client.close()

    records = [r for r in caplog.records if r.name.startswith("tmdb_api")]
    assert records
    for record in records:
        assert "super-secret-key" not in json.dumps(record.__dict__, default=str)


def test_from_settings(monkeypatch):
    monkeypatch.setenv("TMDB_API_KEY", "env-key")
    monkeypatch.setenv("TMDB_BASE_URL", "http://tmdb.test/3/")
    monkeypatch.delenv("TMDB_BEARER_TOKEN", raising=False)

    client = Client.from_settings(executor=FakeExecutor())

    assert client.api_key == "env-key"
    assert client.bearer_token is None
    assert client.base_url == "http://tmdb.test/3"


def test_from_settings_with_invalid_base_url(monkeypatch):
    monkeypatch.setenv("TMDB_API_KEY", "env-key")
    monkeypatch.setenv("TMDB_BASE_URL", "ftp://tmdb.test")

    with pytest.raises(ConfigurationError) as exc_info:
        Client.from_settings(executor=FakeExecutor())

    assert "TMDB_BASE_URL" in str(exc_info.value)


def test_from_settings_without_credentials():
    settings = Settings(_env_file=None, TMDB_API_KEY=None, TMDB_BEARER_TOKEN=None)
    with pytest.raises(ConfigurationError):
        Client.from_settings(settings, executor=FakeExecutor())
