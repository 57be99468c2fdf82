from __future__ import annotations

import json
import logging

import pytest

from app.core.config import get_config
from app.core.exceptions import ConfigurationError
from app.core.logging import LogContext, build_log_event
from app.core.logging_config import JsonFormatter


@pytest.fixture(autouse=True)
def _fresh_config():
    get_config.cache_clear()
    yield
    get_config.cache_clear()


def test_defaults_load_for_development(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("ENV", "development")
    config = get_config()
    assert config.ENV == "development"
    assert config.DATABASE_URL.startswith("sqlite")
    assert config.API_PREFIX == "/api/v1"
    assert config.is_production is False


def test_display_currency_is_uppercased(monkeypatch):
    monkeypatch.setenv("DISPLAY_CURRENCY", "eur")
    assert get_config().DISPLAY_CURRENCY == "EUR"


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("DATABASE_URL", "mysql://db/everflown"),
        ("DATABASE_URL", "postgresql:///missing-host"),
        ("JWT_ACCESS_TTL_MINUTES", "0"),
        ("LOG_LEVEL", "VERBOSE"),
        ("DISPLAY_CURRENCY", "DOLLARS"),
    ],
)
def test_invalid_settings_raise(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigurationError):
        get_config()


def test_production_rejects_placeholder_secret(monkeypatch):
    monkeypatch.setenv("ENV", "production")
    monkeypatch.setenv("JWT_SECRET", "change_me_jwt_secret")
    with pytest.raises(ConfigurationError):
        get_config()


def test_production_disables_debug(monkeypatch):
    monkeypatch.setenv("ENV", "production")
    monkeypatch.setenv("DEBUG", "true")
    monkeypatch.setenv("JWT_SECRET", "a-real-secret")
    monkeypatch.setenv("DEFAULT_ADMIN_PASSWORD", "a-real-password")
    config = get_config()
    assert config.DEBUG is False
    assert config.DB_CONNECTIVITY_REQUIRED is True


def test_json_formatter_includes_extra_fields():
    record = logging.makeLogRecord(
        {"msg": "quote.accepted", "levelname": "INFO", "name": "app.services", "event": "quote.accepted", "quote_id": 7}
    )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["message"] == "quote.accepted"
    assert payload["event"] == "quote.accepted"
    assert payload["quote_id"] == 7


def test_build_log_event_merges_context():
    event = build_log_event("dispatch.order_synced", LogContext(user_id="user-1", entity_kind="order"), order_id=3)
    assert event["event"] == "dispatch.order_synced"
    assert event["order_id"] == 3
    assert event["user_id"] == "user-1"
    assert event["entity_kind"] == "order"
