"""Unit tests for environment-driven settings"""

import pytest
from pydantic import ValidationError

from core_banking_client.config import Settings, get_settings
from core_banking_client.domain.endpoints import DEFAULT_BASE_URL
from core_banking_client.infrastructure.clients.banking import BankingApiClient

ENV_VARS = ("BASE_URL", "LOG_LEVEL", "HTTP_TIMEOUT_SECONDS", "STRICT_STATUS", "PRETTY_JSON")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_base_url_from_environment(monkeypatch):
    monkeypatch.setenv("BASE_URL", "http://x:1/")

    assert Settings(_env_file=None).base_url == "http://x:1/"
    assert BankingApiClient().base_url == "http://x:1"


def test_base_url_defaults_when_unset():
    assert Settings(_env_file=None).base_url == DEFAULT_BASE_URL
    assert BankingApiClient().base_url == DEFAULT_BASE_URL


def test_empty_base_url_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("BASE_URL", "")

    assert Settings(_env_file=None).base_url == DEFAULT_BASE_URL
    assert BankingApiClient().base_url == DEFAULT_BASE_URL


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.log_level == "WARNING"
    assert settings.http_timeout_seconds is None
    assert settings.strict_status is False
    assert settings.pretty_json is False


def test_client_picks_up_strict_and_timeout(monkeypatch):
    monkeypatch.setenv("STRICT_STATUS", "true")
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "2.5")

    client = BankingApiClient("http://bank.test")

    assert client.strict is True
    assert client.timeout == 2.5


def test_explicit_arguments_win_over_settings(monkeypatch):
    monkeypatch.setenv("STRICT_STATUS", "true")

    client = BankingApiClient("http://bank.test", timeout=1.0, strict=False)

    assert client.strict is False
    assert client.timeout == 1.0


def test_invalid_value_raises_on_load_not_import(monkeypatch):
    monkeypatch.setenv("STRICT_STATUS", "maybe")
    with pytest.raises(ValidationError):
        get_settings()


def test_settings_are_cached():
    assert get_settings() is get_settings()
