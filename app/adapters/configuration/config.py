# app/adapters/configuration/config.py

import json
from typing import Annotated, Optional, List, Union
from logging import getLevelName
from pydantic import Field, PostgresDsn, field_validator, ConfigDict
from pydantic_settings import BaseSettings, NoDecode

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./clientes.db"


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"

    # Environment
    ENVIRONMENT: str = "development"  # "development", "production", "testing"

    # Database
    DB_DRIVER: str = "asyncpg"
    POSTGRES_USER: Optional[str] = None
    POSTGRES_PASSWORD: Optional[str] = None
    POSTGRES_DB: Optional[str] = None
    POSTGRES_HOST: Optional[str] = None
    POSTGRES_PORT: int = 5432
    DATABASE_URL: Optional[str] = Field(default=None, validate_default=True)

    # Nova flag de debug
    DEBUG: bool = False

    # CORS
    CORS_ORIGINS: Annotated[List[str], NoDecode] = ["http://localhost:8000", "http://127.0.0.1:8000"]

    # API Documentation
    SCHEMA_VISIBILITY: bool = True

    @field_validator("DATABASE_URL", mode="before")
    def assemble_db_url(cls, value, info):
        """
        Usa DATABASE_URL quando informada; senão monta a DSN do Postgres a
        partir dos campos POSTGRES_*, ou cai no SQLite local.
        """
        if value:
            return value

        data = info.data
        if not data.get("POSTGRES_HOST"):
            return DEFAULT_DATABASE_URL

        return str(PostgresDsn.build(
            scheme=f"postgresql+{data.get('DB_DRIVER', 'asyncpg')}",
            username=data.get("POSTGRES_USER"),
            password=data.get("POSTGRES_PASSWORD"),
            host=data["POSTGRES_HOST"],
            port=data.get("POSTGRES_PORT"),
            path=data.get("POSTGRES_DB"),
        ))

    @field_validator("CORS_ORIGINS", mode="before")
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        """
        Se vier como string CSV (ex: 'a,b,c'), transforma em lista.
        Se vier já como lista ou JSON, retorna como está.
        """
        if isinstance(v, str) and not v.startswith("["):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        if isinstance(v, str):
            return json.loads(v)
        if isinstance(v, list):
            return v
        raise ValueError(f"CORS_ORIGINS inválido: {v!r}")

    @field_validator("LOG_LEVEL", mode="before")
    def validate_log_level(cls, v: str) -> str:
        """Garante que o valor é um nível válido do logging"""
        lvl = v.upper()
        if not isinstance(getLevelName(lvl), int):
            raise ValueError(f"LOG_LEVEL inválido: {v!r}")
        return lvl

    model_config = ConfigDict(env_file=".env", extra="ignore")


settings = Settings()
