from kopi_content.settings import Settings


def _settings(**values) -> Settings:
    return Settings(_env_file=None, **values)


def test_cors_origins_accepts_comma_separated_string():
    settings = _settings(CORS_ORIGINS="https://sehatikopi.id, http://localhost:3000 ,")
    assert settings.cors_origins == ["https://sehatikopi.id", "http://localhost:3000"]


def test_cors_origins_accepts_json_array_string():
    settings = _settings(ALLOWED_ORIGINS='["https://sehatikopi.id"]')
    assert settings.cors_origins == ["https://sehatikopi.id"]


def test_store_configured_depends_on_backend():
    assert not _settings(content_store="postgres", database_url="").store_configured
    assert _settings(content_store="postgres", database_url="postgresql://u:p@db:5432/kopi").store_configured
    assert _settings(content_store="memory").store_configured
    assert not _settings(content_store="none", database_url="postgresql://u:p@db:5432/kopi").store_configured


def test_async_database_url_uses_asyncpg_driver():
    settings = _settings(database_url="postgresql://u:p@db:5432/kopi")
    assert settings.async_database_url == "postgresql+asyncpg://u:p@db:5432/kopi"


def test_railway_internal_host_disables_ssl():
    settings = _settings(database_url="postgresql://u:p@postgres.railway.internal:5432/railway")
    assert settings.asyncpg_connect_args == {"ssl": False, "timeout": 20}

    settings = _settings(database_url="postgresql://u:p@db.example.com:5432/kopi")
    assert settings.asyncpg_connect_args == {}
