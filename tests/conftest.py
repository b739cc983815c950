"""
AIWF Client - Test Configuration and Fixtures

This module provides a fake AIWF server built on httpx.MockTransport and
shared fixtures for all tests.
"""

import json
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
import pytest

from aiwf_client.client import AIWFClient
from aiwf_client.demo import ENGLISH_SAMPLE, RUSSIAN_SAMPLE


# =============================================================================
# Fake Server
# =============================================================================


Route = Callable[[httpx.Request], httpx.Response]


class FakeAIWFServer:
    """Routes requests to canned responses and records every request."""

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Route] = {}
        self.requests: List[httpx.Request] = []

    def add(self, method: str, path: str, route: Route) -> None:
        self.routes[(method, path)] = route

    def add_json(self, method: str, path: str, body: Any, status_code: int = 200) -> None:
        self.add(method, path, lambda request: httpx.Response(status_code, json=body))

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, text="404 page not found")
        return route(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def client(self, base_url: str = "http://127.0.0.1:8080", api_key: Optional[str] = None) -> AIWFClient:
        return AIWFClient(base_url, api_key, transport=self.transport)

    def bodies(self, path: Optional[str] = None) -> List[Dict[str, Any]]:
        """Decoded JSON bodies of recorded requests."""
        return [
            json.loads(r.content)
            for r in self.requests
            if r.content and (path is None or r.url.path == path)
        ]


def translator_route(translations: Dict[str, Dict[str, Any]]) -> Route:
    """A translator agent answering from a text -> response mapping."""

    def route(request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        answer = translations.get(payload["text"])
        if answer is None:
            return httpx.Response(500, text="translation failed")
        return httpx.Response(200, json=answer)

    return route


# =============================================================================
# Sample Data Fixtures
# =============================================================================


@pytest.fixture
def translations() -> Dict[str, Dict[str, Any]]:
    """Canned translator answers for the example requests."""
    return {
        RUSSIAN_SAMPLE: {
            "translated": "Hello, world! This is an example of using AIWF.",
            "source_lang": "ru",
            "confidence": 0.95,
        },
        ENGLISH_SAMPLE: {
            "translated": "¡Hola, mundo!",
            "source_lang": "en",
            "confidence": 0.875,
        },
    }


@pytest.fixture
def server() -> FakeAIWFServer:
    """An empty fake server."""
    return FakeAIWFServer()


@pytest.fixture
def translator_server(server, translations) -> FakeAIWFServer:
    """A fake server exposing the translator agent."""
    server.add("POST", "/agent/translator", translator_route(translations))
    return server
