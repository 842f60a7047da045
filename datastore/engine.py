"""Connection pool construction."""

from __future__ import annotations

import logging
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine, make_url

from settings import Settings, get_settings

logger = logging.getLogger(__name__)


def build_database_url(settings: Settings) -> URL:
    if settings.database_url:
        return make_url(settings.database_url)
    return URL.create(
        "mysql+pymysql",
        username=settings.db_user,
        password=settings.db_password or None,
        host=settings.db_host,
        port=settings.db_port,
        database=settings.db_name,
    )


def build_engine(settings: Settings) -> Engine:
    """Create the process-wide pooled engine described by ``settings``."""
    url = build_database_url(settings)
    options = {"pool_pre_ping": True}
    if url.get_backend_name() != "sqlite":
        options.update(
            pool_size=settings.pool_size,
            max_overflow=max(settings.pool_max - settings.pool_size, 0),
            pool_recycle=settings.pool_recycle_seconds,
            pool_timeout=settings.pool_timeout_seconds,
        )

    logger.info(
        "Creating database engine backend=%s host=%s db=%s pool_size=%s pool_max=%s",
        url.get_backend_name(),
        url.host,
        url.database,
        settings.pool_size,
        settings.pool_max,
    )
    return create_engine(url, **options)


@lru_cache
def build_default_engine() -> Engine:
    return build_engine(get_settings())
