import httpx
import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app


class FakeClock:
    """Millisecond clock the tests can move forward by hand."""

    def __init__(self, start: int = 1_700_000_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


def make_settings(**overrides) -> Settings:
    values = {
        "openai_api_key": "",
        "runway_api_key": "",
        "pika_api_key": "",
        "base_url": "",
        "static_dir": "static",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def _unreachable(request: httpx.Request) -> httpx.Response:
    raise AssertionError(f"unexpected upstream call to {request.url}")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def upstream_calls():
    return []


@pytest.fixture
def make_client(clock, upstream_calls, tmp_path):
    """Factory: make_client(handler=None, **settings_overrides) -> TestClient.

    `handler` receives each outbound httpx.Request; requests are also
    recorded in `upstream_calls`.
    """
    clients = []

    def _make(handler=None, **overrides):
        handler = handler or _unreachable

        def recording_handler(request: httpx.Request) -> httpx.Response:
            upstream_calls.append(request)
            return handler(request)

        overrides.setdefault("static_dir", str(tmp_path))
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
        app = create_app(make_settings(**overrides), http_client=http_client, clock=clock)
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)
