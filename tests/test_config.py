"""Tests for settings loading."""

from gemcode.config import Settings


def test_settings_defaults():
    s = Settings(_env_file=None)
    assert s.database_url.startswith("postgresql+asyncpg://")
    assert s.environment == "development"
    assert s.code_mint_max_attempts == 5


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("CODE_MINT_MAX_ATTEMPTS", "9")
    monkeypatch.setenv("ENVIRONMENT", "production")
    s = Settings(_env_file=None)
    assert s.code_mint_max_attempts == 9
    assert s.environment == "production"
