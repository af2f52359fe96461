from types import SimpleNamespace

import httpx
import pytest
from fastapi.testclient import TestClient

from config import Settings, get_settings
from main import app
from routes.heygen_routes import get_heygen_token_service
from routes.realtime_routes import get_realtime_token_service
from services.heygen_token_service import HeyGenTokenService
from services.realtime_token_service import RealtimeTokenService


class FakeClientSecrets:
    """Stands in for AsyncOpenAI().realtime.client_secrets"""

    def __init__(self, value="secret-123", error=None):
        self.value = value
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(value=self.value)


class FakeOpenAI:
    def __init__(self, value="secret-123", error=None):
        self.client_secrets = FakeClientSecrets(value=value, error=error)
        self.realtime = SimpleNamespace(client_secrets=self.client_secrets)


class HeyGenUpstream:
    """httpx.MockTransport handler that records every outbound request"""

    def __init__(self, status_code=200, json=None, text=None, error=None):
        self.status_code = status_code
        self.json = json
        self.text = text
        self.error = error
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.json)


def make_settings(**overrides) -> Settings:
    values = {
        "openai_api_key": "sk-test",
        "openai_realtime_model": "gpt-realtime",
        "heygen_api_key": "hg-test",
        "heygen_api_base": "https://api.heygen.com",
        "allowed_origins": "*",
        "log_level": "INFO",
        "log_format": "console",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_heygen_service(upstream: HeyGenUpstream, api_key: str = "hg-test") -> HeyGenTokenService:
    return HeyGenTokenService(api_key=api_key, transport=httpx.MockTransport(upstream))


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def fake_openai():
    return FakeOpenAI()


@pytest.fixture
def client(settings, fake_openai):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_realtime_token_service] = lambda: RealtimeTokenService(fake_openai)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def use_heygen():
    """Route /api/heygen-token through the given fake upstream"""

    def _install(upstream: HeyGenUpstream, api_key: str = "hg-test") -> HeyGenUpstream:
        service = make_heygen_service(upstream, api_key=api_key)
        app.dependency_overrides[get_heygen_token_service] = lambda: service
        return upstream

    return _install
