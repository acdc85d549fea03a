import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core import db, log, settings
from graphql_api import schema as graphql_schema
from health import router as health_router
from items import router as items_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    logger.info("api_started")
    try:
        yield
    finally:
        await db.close_pool()
        logger.info("api_stopped")


app = FastAPI(title="item-catalog", lifespan=lifespan)

# Allow local frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def correlation_id_middleware(request: Request, call_next):
    correlation_id = request.headers.get(log.CORRELATION_ID_HEADER, "").strip() or log.new_correlation_id()
    token = log.set_correlation_id(correlation_id)
    try:
        response = await call_next(request)
    finally:
        log.reset_correlation_id(token)
    response.headers[log.CORRELATION_ID_HEADER] = correlation_id
    return response


@app.exception_handler(RequestValidationError)
async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(db.StorageError)
async def storage_error_handler(request: Request, exc: db.StorageError) -> JSONResponse:
    logger.error("storage_error method=%s path=%s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Storage error."},
    )


app.include_router(items_router.router, tags=["items"])
app.include_router(health_router.router, tags=["health"])
app.include_router(graphql_schema.build_router(), prefix="/api/graphql", tags=["graphql"])


def run() -> None:
    log.configure_logging()
    uvicorn.run(app, host=settings.api_host(), port=settings.api_port(), log_config=None)


if __name__ == "__main__":
    run()
