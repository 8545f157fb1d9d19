"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from lifehacking.config import configure_logging, get_settings
from lifehacking.database import create_tables, dispose_engine, initialize_database
from lifehacking.infrastructure.common.errors import AppHTTPException
from lifehacking.infrastructure.common.schemas import ErrorResponse
from lifehacking.infrastructure.favorites.routers import favorites
from lifehacking.infrastructure.identity.routers import users

settings = get_settings()
configure_logging(settings.ENVIRONMENT)
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    initialize_database(settings)
    if settings.DATABASE_URL.startswith("sqlite"):
        await create_tables()
    logger.info("application_started", environment=settings.ENVIRONMENT, version=settings.VERSION)
    yield
    await dispose_engine()
    logger.info("application_stopped")


app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppHTTPException)
async def app_http_exception_handler(request: Request, exc: AppHTTPException) -> JSONResponse:
    body = ErrorResponse(status=exc.status_code, title=exc.title, detail=str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


app.include_router(favorites.router, prefix=settings.API_PREFIX)
app.include_router(users.router, prefix=settings.API_PREFIX)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
