from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import router
from app.web import router as web_router
from datastore.engine import build_default_engine
from datastore.readings import build_default_repository
from datastore.schema import create_schema
from logging_config import configure_logging
from settings import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    repository = build_default_repository()
    if get_settings().create_schema:
        create_schema(repository.engine)
    try:
        yield
    finally:
        repository.engine.dispose()
        build_default_repository.cache_clear()
        build_default_engine.cache_clear()


def create_app() -> FastAPI:
    configure_logging()
    settings = get_settings()
    app = FastAPI(
        title="IAQ Sensor API",
        description="Stores and serves indoor air-quality readings.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
        allow_credentials=True,
    )
    app.include_router(router)
    app.include_router(web_router)
    return app


def run() -> None:
    settings = get_settings()
    logger.info("Starting sensor API server on %s:%s", settings.host, settings.port)
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


app = create_app()
