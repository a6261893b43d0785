# test/conftest.py
from dataclasses import dataclass, field

import pytest
import pytest_asyncio
from fastapi import FastAPI, Request, Response
from httpx import ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from workshop_sdk.api_client import ClientConfig
from workshop_sdk.auth_store import AuthStore
from workshop_sdk.client import WorkshopClient

TEST_API_BASE = "http://test/api"
TEST_DB_URL = "sqlite+aiosqlite:///:memory:"


@dataclass
class RecordedRequest:
    method: str
    path: str
    query: str
    headers: dict[str, str]
    body: bytes


@dataclass
class StubServer:
    """
    Stand-in for the workshop API. Records every request it receives and
    answers all of them with the configured status and body.
    """

    status: int = 200
    body: str = ""
    requests: list[RecordedRequest] = field(default_factory=list)

    def respond(self, status: int = 200, body: str = "") -> None:
        self.status = status
        self.body = body

    @property
    def last(self) -> RecordedRequest:
        return self.requests[-1]


def make_stub_app(stub: StubServer) -> FastAPI:
    app = FastAPI()

    @app.api_route("/{path:path}", methods=["GET", "POST", "PUT", "DELETE"])
    async def catch_all(path: str, request: Request) -> Response:
        stub.requests.append(
            RecordedRequest(
                method=request.method,
                path=request.url.path,
                query=request.url.query,
                headers={k.lower(): v for k, v in request.headers.items()},
                body=await request.body(),
            )
        )
        return Response(
            content=stub.body, status_code=stub.status, media_type="application/json"
        )

    return app


@pytest.fixture
def stub() -> StubServer:
    return StubServer()


@pytest.fixture
def transport(stub):
    return ASGITransport(app=make_stub_app(stub))


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(base_url=TEST_API_BASE)


@pytest.fixture
def client(config, transport) -> WorkshopClient:
    return WorkshopClient(config, transport=transport)


@pytest_asyncio.fixture(scope="function")
async def auth_store():
    """
    Fresh in-memory auth store per test. StaticPool keeps the single
    connection (and so the database) alive across sessions.
    """
    engine = create_async_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    store = AuthStore(engine=engine)
    await store.init_store()
    yield store
    await store.dispose()
