from __future__ import annotations

from typing import Iterator

import pytest

from datastore.engine import build_database_url, build_engine
from settings import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch) -> None:
    for name in ("DATABASE_URL", "MYSQL_HOST", "MYSQL_PORT", "PORT", "CORS_ALLOW_ORIGINS"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.database_url is None
    assert settings.db_host == "localhost"
    assert settings.db_port == 3306
    assert settings.port == 8080
    assert settings.pool_max == 25
    assert settings.pool_recycle_seconds == 300
    assert settings.cors_allow_origins == ("*",)


def test_environment_overrides_apply(monkeypatch) -> None:
    monkeypatch.setenv("MYSQL_HOST", "db.internal")
    monkeypatch.setenv("MYSQL_PORT", "3307")
    monkeypatch.setenv("MYSQL_USER", "sensor")
    monkeypatch.setenv("MYSQL_PASS", "p@ss/word")
    monkeypatch.setenv("MYSQL_DB", "iaq")
    monkeypatch.setenv("DB_POOL_SIZE", "2")
    monkeypatch.setenv("DB_POOL_MAX", "10")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CREATE_SCHEMA", "yes")

    settings = get_settings()

    assert settings.db_host == "db.internal"
    assert settings.db_port == 3307
    assert settings.pool_size == 2
    assert settings.pool_max == 10
    assert settings.cors_allow_origins == ("https://a.example", "https://b.example")
    assert settings.log_level == "DEBUG"
    assert settings.create_schema is True

    url = build_database_url(settings)
    assert url.drivername == "mysql+pymysql"
    assert url.host == "db.internal"
    assert url.port == 3307
    assert url.username == "sensor"
    assert url.password == "p@ss/word"
    assert url.database == "iaq"


def test_invalid_port_falls_back_to_default(monkeypatch) -> None:
    monkeypatch.setenv("MYSQL_PORT", "not-a-port")

    assert get_settings().db_port == 3306


def test_database_url_overrides_mysql_settings(monkeypatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("MYSQL_HOST", "ignored")

    settings = get_settings()
    engine = build_engine(settings)

    try:
        assert engine.url.get_backend_name() == "sqlite"
    finally:
        engine.dispose()
