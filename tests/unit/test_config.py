"""Testes da montagem das configurações."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from app.adapters.configuration.config import DEFAULT_DATABASE_URL, Settings


@pytest.fixture()
def clean_env(monkeypatch):
    for name in ("DATABASE_URL", "POSTGRES_HOST", "POSTGRES_DB", "CORS_ORIGINS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_database_url_falls_back_to_local_sqlite(clean_env) -> None:
    assert Settings(_env_file=None).DATABASE_URL == DEFAULT_DATABASE_URL


def test_database_url_is_assembled_from_postgres_fields(clean_env) -> None:
    settings = Settings(
        _env_file=None,
        POSTGRES_USER="app",
        POSTGRES_PASSWORD="secret",
        POSTGRES_HOST="db",
        POSTGRES_DB="clientes",
    )

    assert settings.DATABASE_URL.startswith("postgresql+asyncpg://app:secret@db:5432/")
    assert settings.DATABASE_URL.endswith("clientes")


def test_explicit_database_url_wins(clean_env) -> None:
    settings = Settings(_env_file=None, DATABASE_URL="sqlite+aiosqlite:///./outro.db", POSTGRES_HOST="db")

    assert settings.DATABASE_URL == "sqlite+aiosqlite:///./outro.db"


def test_cors_origins_accepts_csv_from_environment(clean_env, monkeypatch) -> None:
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")

    assert Settings(_env_file=None).CORS_ORIGINS == ["http://a.test", "http://b.test"]


def test_invalid_log_level_is_rejected(clean_env) -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, LOG_LEVEL="verbose")
