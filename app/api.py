"""HTTP route definitions for the service."""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.schemas import InsertResponse, ReadingIn, ReadingOut
from datastore.errors import StorageError
from datastore.readings import ReadingRepository, build_default_repository

logger = logging.getLogger(__name__)

DEFAULT_FETCH_LIMIT = 15000
DEFAULT_LATEST_LIMIT = 1
MAX_LIMIT = 1_000_000

router = APIRouter()


def get_repository() -> ReadingRepository:
    return build_default_repository()


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    candidate = value.strip()
    return candidate or None


@router.get(
    "/api/sensor-data",
    response_model=List[ReadingOut],
    response_model_exclude_none=True,
    summary="Fetch readings in an optional time range, newest first.",
)
def get_sensor_data(
    start_date: Optional[str] = Query(None, description="Inclusive lower bound on storage time."),
    end_date: Optional[str] = Query(None, description="Inclusive upper bound on storage time."),
    limit: int = Query(
        DEFAULT_FETCH_LIMIT, ge=1, le=MAX_LIMIT, description="Maximum number of readings."
    ),
    repository: ReadingRepository = Depends(get_repository),
) -> List[ReadingOut]:
    start = _blank_to_none(start_date)
    end = _blank_to_none(end_date)
    logger.info(
        "Fetching sensor data",
        extra={"start_date": start, "end_date": end, "limit": limit},
    )
    try:
        readings = repository.fetch(limit, start=start, end=end)
    except StorageError as exc:
        logger.exception("Error fetching sensor data")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch sensor data",
        ) from exc

    logger.info("Returned sensor data", extra={"record_count": len(readings)})
    return [ReadingOut.from_domain(reading) for reading in readings]


@router.get(
    "/api/sensor-data/latest",
    response_model=List[ReadingOut],
    response_model_exclude_none=True,
    summary="Fetch the most recent readings.",
)
def get_latest_sensor_data(
    limit: int = Query(
        DEFAULT_LATEST_LIMIT, ge=1, le=MAX_LIMIT, description="Maximum number of readings."
    ),
    repository: ReadingRepository = Depends(get_repository),
) -> List[ReadingOut]:
    try:
        readings = repository.fetch(limit)
    except StorageError as exc:
        logger.exception("Error fetching latest sensor data")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch latest sensor data",
        ) from exc
    return [ReadingOut.from_domain(reading) for reading in readings]


@router.post(
    "/api/sensor-data",
    status_code=status.HTTP_201_CREATED,
    response_model=InsertResponse,
    summary="Store one sensor reading.",
)
def post_sensor_data(
    payload: ReadingIn,
    repository: ReadingRepository = Depends(get_repository),
) -> InsertResponse:
    try:
        repository.insert(payload.to_domain())
    except StorageError as exc:
        logger.exception("Error inserting sensor data")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to insert sensor data",
        ) from exc
    return InsertResponse()


@router.get(
    "/health",
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get(
    "/",
    summary="Root endpoint mirrors health information.",
    status_code=status.HTTP_200_OK,
)
async def root() -> dict[str, str]:
    return {"status": "ok", "detail": "See /health for service status."}
