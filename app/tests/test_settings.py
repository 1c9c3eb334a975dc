from app.core.settings import Settings


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("CACHE_ENABLED", "false")
    monkeypatch.setenv("CACHE_CAPACITY", "50")

    settings = Settings()
    assert settings.port == 8080
    assert settings.cache_enabled is False
    assert settings.cache_capacity == 50


def test_settings_defaults(monkeypatch):
    for name in ("HOST", "PORT", "LOG_LEVEL", "CACHE_ENABLED", "CACHE_CAPACITY", "CACHE_NEGATIVE_TTL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)
    assert settings.port == 1234
    assert settings.cache_enabled is True
    assert settings.cache_capacity == 1000
    assert settings.cache_negative_ttl == 5.0
