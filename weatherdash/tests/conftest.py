import json
from unittest.mock import MagicMock

import pytest
import requests

from weatherdash.app import create_app
from weatherdash.config import AIServiceConfig, Settings
from weatherdash.services.summary_gateway import SummaryGateway

PARIS = {
    "city": "Paris",
    "country": "France",
    "temp": 12,
    "humidity": 64,
    "condition": "Cloudy",
    "windSpeed": 12,
    "datetime": "2024-01-01 10:00:00",
}

SUNNY = {"choices": [{"message": {"content": "Sunny and bright ☀️"}}]}


def fake_response(status=200, body=None, text=None):
    res = requests.Response()
    res.status_code = status
    raw = text if text is not None else json.dumps(body)
    res._content = raw.encode("utf-8")
    res.encoding = "utf-8"
    return res


@pytest.fixture
def paris():
    return dict(PARIS)


@pytest.fixture
def make_response():
    return fake_response


@pytest.fixture
def ai_config():
    return AIServiceConfig(base_url="http://ai.test/v1", model="test-model", api_key=None)


@pytest.fixture
def upstream():
    """requests.Session 대역. 기본 응답은 정상 요약"""
    session = MagicMock(spec=requests.Session)
    session.post.return_value = fake_response(body=SUNNY)
    return session


@pytest.fixture
def gateway(ai_config, upstream):
    return SummaryGateway(ai_config, session=upstream)


@pytest.fixture
def settings(ai_config):
    return Settings(ai=ai_config, weather_provider="mock", start_scheduler=False, testing=True)


@pytest.fixture
def app(settings, gateway):
    return create_app(settings, summary_gateway=gateway)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(client):
    res = client.post("/register", json={
        "name": "Test User",
        "email": "test@example.com",
        "password": "secret-pass",
        "password_confirmation": "secret-pass",
    })
    token = res.get_json()["access_token"]
    return {"Authorization": f"Bearer {token}"}
