import pytest
import pytest_asyncio

from helpers.fakes import FakeTMDBServer, make_client


@pytest.fixture
def server():
    return FakeTMDBServer()


@pytest_asyncio.fixture
async def client(server):
    client = make_client(server)
    yield client
    await client.close()
