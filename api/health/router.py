"""
Health endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from . import service

router = APIRouter()


@router.get("/health")
async def health() -> JSONResponse:
    db_status = await service.check()
    code = status.HTTP_200_OK if db_status is service.DbStatus.UP else status.HTTP_503_SERVICE_UNAVAILABLE
    return JSONResponse(status_code=code, content={"status": db_status.value})
