"""Shared fixtures: settings override, fake provider, fake remote images."""

from types import SimpleNamespace

import httpx
import pytest
import requests
from fastapi.testclient import TestClient

from imagegen.api import images as images_api
from imagegen.core.config import AppSettings, get_settings
from imagegen.main import app
from imagegen.services import fetch as fetch_service


class FakeImages:
    """Stands in for ``client.images``; plays back one outcome per call."""

    def __init__(self, outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    async def generate(self, **kwargs):
        self.calls.append(kwargs)
        outcome = self.outcomes[len(self.calls) - 1]
        if isinstance(outcome, Exception):
            raise outcome
        return SimpleNamespace(data=[SimpleNamespace(url=outcome)])


class FakeImageClient:
    def __init__(self, outcomes):
        self.images = FakeImages(outcomes)

    @property
    def prompts(self):
        return [call["prompt"] for call in self.images.calls]


def provider_error(cls, status, message):
    request = httpx.Request("POST", "https://api.openai.com/v1/images/generations")
    response = httpx.Response(status, request=request)
    return cls(message, response=response, body=None)


def remote_response(status=200, content=b"", content_type="image/png", reason="OK"):
    response = requests.Response()
    response.status_code = status
    response.reason = reason
    response._content = content
    if content_type:
        response.headers["Content-Type"] = content_type
    return response


@pytest.fixture
def settings():
    return AppSettings(_env_file=None, openai_api_key="sk-test")


@pytest.fixture
def api(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def fake_provider(monkeypatch):
    """Install a fake provider client that returns the given outcomes."""

    def install(outcomes):
        fake = FakeImageClient(outcomes)
        monkeypatch.setattr(images_api, "get_image_client", lambda settings: fake)
        return fake

    return install


@pytest.fixture
def remote_image(monkeypatch):
    """Make the fetch proxy see ``response`` for any URL; records requested URLs."""

    def install(response):
        requested = []

        def fake_get(url, timeout=None):
            requested.append(url)
            if isinstance(response, Exception):
                raise response
            return response

        monkeypatch.setattr(fetch_service.requests, "get", fake_get)
        return requested

    return install
