from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.api import get_repository
from app.schemas import ReadingOut
from datastore.errors import StorageError
from datastore.readings import ReadingRepository

logger = logging.getLogger(__name__)

DEFAULT_DASHBOARD_LIMIT = 50

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))


router = APIRouter(include_in_schema=False)


@router.get("/ui", name="ui_index", response_class=HTMLResponse)
def ui_index(
    request: Request,
    limit: int = Query(DEFAULT_DASHBOARD_LIMIT, ge=1, le=1000),
    repository: ReadingRepository = Depends(get_repository),
) -> HTMLResponse:
    try:
        readings = repository.fetch(limit)
    except StorageError as exc:
        logger.exception("Error loading dashboard readings")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Sensor storage is unavailable.",
        ) from exc

    return templates.TemplateResponse(
        request,
        "ui/index.html",
        {
            "readings": [ReadingOut.from_domain(reading) for reading in readings],
            "limit": limit,
        },
    )
