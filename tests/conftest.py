"""Pytest fixtures for testing"""

import json
from typing import Callable, List

import httpx
import pytest
from fastapi import FastAPI

from core_banking_client.config import get_settings
from core_banking_client.infrastructure.clients.banking import BankingApiClient
from mock_bank.main import create_app

TEST_BASE_URL = "http://bank.test"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served"""

    def __init__(self, status_code: int = 200, body: str = "{}"):
        self.requests: List[httpx.Request] = []
        self.status_code = status_code
        self.body = body
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last.content)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings from the environment in every test"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_client() -> Callable[..., tuple[BankingApiClient, RecordingTransport]]:
    """Factory for a client whose server answers every request with a fixed response"""

    def factory(status_code: int = 200, body: str = "{}", base_url: str = TEST_BASE_URL, strict: bool = False):
        transport = RecordingTransport(status_code, body)
        return BankingApiClient(base_url, strict=strict, transport=transport), transport

    return factory


@pytest.fixture
def bank_app() -> FastAPI:
    """Fresh mock Core Banking app with seeded accounts"""
    return create_app()


@pytest.fixture
def bank_transport(bank_app: FastAPI) -> httpx.ASGITransport:
    return httpx.ASGITransport(app=bank_app)


@pytest.fixture
def bank_client(bank_transport: httpx.ASGITransport) -> BankingApiClient:
    """Client wired to the in-process mock server"""
    return BankingApiClient("http://testserver", transport=bank_transport)
