# test/test_settings.py
from workshop_sdk.settings import DEFAULT_API_BASE, DEFAULT_AUTH_DB_URL, load_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("WORKSHOP_HOST", raising=False)
    monkeypatch.delenv("WORKSHOP_AUTH_DB_URL", raising=False)

    settings = load_settings()
    assert settings.api_base == DEFAULT_API_BASE == "http://localhost:8080/api"
    assert settings.auth_db_url == DEFAULT_AUTH_DB_URL


def test_host_override(monkeypatch):
    monkeypatch.setenv("WORKSHOP_HOST", "https://workshop.example.com/")
    monkeypatch.setenv("WORKSHOP_AUTH_DB_URL", "sqlite+aiosqlite:///./other.db")

    settings = load_settings()
    assert settings.api_base == "https://workshop.example.com/api"
    assert settings.auth_db_url == "sqlite+aiosqlite:///./other.db"
