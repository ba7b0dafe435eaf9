"""Shared fixtures: an app wired to a scripted upstream."""

from collections.abc import Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from app import create_app
from core.config import Config
from ui import log_utils


class RecordingLogger:
    """RequestLogger that keeps calls in memory."""

    def __init__(self) -> None:
        self.relays: list[dict] = []
        self.errors: list[tuple[str, int, str]] = []

    def log_relay(self, route, url, status, *, sent_bytes, received_bytes) -> None:
        self.relays.append(
            {
                "route": route,
                "url": url,
                "status": status,
                "sent_bytes": sent_bytes,
                "received_bytes": received_bytes,
            }
        )

    def log_error(self, route: str, status: int, message: str) -> None:
        self.errors.append((route, status, message))


class FakeUpstream:
    """Records outbound requests and answers through ``respond``."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.respond: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(200)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)


@pytest.fixture(autouse=True)
def log_root(tmp_path, monkeypatch):
    root = tmp_path / "logs"
    monkeypatch.setattr(log_utils, "LOG_ROOT", root)
    return root


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def client(config, upstream, logger):
    app = create_app(config, logger, transport=httpx.MockTransport(upstream))
    with TestClient(app) as test_client:
        yield test_client
