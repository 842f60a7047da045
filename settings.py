from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

_DATABASE_URL_ENV = "DATABASE_URL"
_DB_HOST_ENV = "MYSQL_HOST"
_DB_PORT_ENV = "MYSQL_PORT"
_DB_USER_ENV = "MYSQL_USER"
_DB_PASSWORD_ENV = "MYSQL_PASS"
_DB_NAME_ENV = "MYSQL_DB"
_POOL_SIZE_ENV = "DB_POOL_SIZE"
_POOL_MAX_ENV = "DB_POOL_MAX"
_POOL_RECYCLE_ENV = "DB_POOL_RECYCLE"
_POOL_TIMEOUT_ENV = "DB_POOL_TIMEOUT"
_CREATE_SCHEMA_ENV = "CREATE_SCHEMA"
_HOST_ENV = "HOST"
_PORT_ENV = "PORT"
_CORS_ORIGINS_ENV = "CORS_ALLOW_ORIGINS"
_LOG_LEVEL_ENV = "LOG_LEVEL"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    database_url: Optional[str]
    db_host: str
    db_port: int
    db_user: str
    db_password: str
    db_name: str
    pool_size: int
    pool_max: int
    pool_recycle_seconds: int
    pool_timeout_seconds: int
    create_schema: bool
    host: str
    port: int
    cors_allow_origins: Tuple[str, ...]
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_optional_env(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return None
    candidate = value.strip()
    return candidate or None


def _read_positive_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = int(candidate)
    except ValueError:
        logger.warning("Invalid integer for %s=%r, using default %s", name, candidate, default)
        return default
    return parsed if parsed > 0 else default


def _read_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def _read_origins(default: Tuple[str, ...]) -> Tuple[str, ...]:
    value = os.getenv(_CORS_ORIGINS_ENV)
    if value is None:
        return default
    origins = tuple(origin.strip() for origin in value.split(",") if origin.strip())
    return origins or default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        database_url=_read_optional_env(_DATABASE_URL_ENV),
        db_host=_read_str_env(_DB_HOST_ENV, "localhost"),
        db_port=_read_positive_int(_DB_PORT_ENV, 3306),
        db_user=_read_str_env(_DB_USER_ENV, "data"),
        db_password=os.getenv(_DB_PASSWORD_ENV, ""),
        db_name=_read_str_env(_DB_NAME_ENV, "buildingData"),
        pool_size=_read_positive_int(_POOL_SIZE_ENV, 5),
        pool_max=_read_positive_int(_POOL_MAX_ENV, 25),
        pool_recycle_seconds=_read_positive_int(_POOL_RECYCLE_ENV, 300),
        pool_timeout_seconds=_read_positive_int(_POOL_TIMEOUT_ENV, 30),
        create_schema=_read_bool(_CREATE_SCHEMA_ENV, False),
        host=_read_str_env(_HOST_ENV, "0.0.0.0"),
        port=_read_positive_int(_PORT_ENV, 8080),
        cors_allow_origins=_read_origins(("*",)),
        log_level=_read_log_level("INFO"),
    )
