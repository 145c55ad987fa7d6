"""Tests for settings loading."""
from mpesa_qr.config import Settings, get_settings


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("MPESA_QR_APP_NAME", "duka-qr")
    monkeypatch.setenv("MPESA_QR_LOGGING__LEVEL", "DEBUG")

    settings = Settings()

    assert settings.app_name == "duka-qr"
    assert settings.logging.level == "DEBUG"


def test_get_settings_is_memoized():
    assert get_settings() is get_settings()


def test_api_key_from_test_environment():
    assert get_settings().api_key == "test-api-key"
