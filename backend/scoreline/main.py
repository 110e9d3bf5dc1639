"""
backend/scoreline/main.py

Purpose:
    FastAPI application bootstrap: logging, middleware/router wiring, error
    mapping, and provider client shutdown.

Dependencies:
    - scoreline.config
    - scoreline.providers.*
    - scoreline.routers.*
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from scoreline.config import settings
from scoreline.middleware.logging import StructuredLoggingMiddleware, setup_logging
from scoreline.providers.apisports import apisports_provider
from scoreline.providers.espn import espn_provider
from scoreline.providers.http_client import UpstreamError
from scoreline.providers.nba_cdn import nba_cdn_provider

logger = logging.getLogger("scoreline")


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL)
    logger.info("Scoreline API starting (API-Sports host %s)", settings.APISPORTS_HOST)

    yield

    for provider in (espn_provider, apisports_provider, nba_cdn_provider):
        await provider.aclose()


app = FastAPI(
    title="Scoreline",
    description="Normalized scores, schedules, odds and win probabilities",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS.split(","),
    allow_credentials=False,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type"],
)

# Structured logging
app.add_middleware(StructuredLoggingMiddleware)

# Routers
from scoreline.routers.scores import router as scores_router
from scoreline.routers.espn import router as espn_router
from scoreline.routers.nfl import router as nfl_router
from scoreline.routers.nba import router as nba_router
from scoreline.routers.odds import router as odds_router
from scoreline.routers.games import router as games_router

app.include_router(scores_router)
app.include_router(espn_router)
app.include_router(nfl_router)
app.include_router(nba_router)
app.include_router(odds_router)
app.include_router(games_router)


@app.exception_handler(UpstreamError)
async def upstream_error_handler(request: Request, exc: UpstreamError):
    """Provider failures surface as 502 with the upstream status and body."""
    request.state.upstream = {"provider": exc.provider, "status": exc.status_code}
    logger.warning("Upstream failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=502, content={"detail": str(exc)})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Return clean validation errors without leaking internal field paths."""
    errors = []
    for err in exc.errors():
        loc = err.get("loc", ())
        # Strip the "path" / "query" prefix for cleaner messages
        field = ".".join(str(l) for l in loc[1:]) if len(loc) > 1 else str(loc[-1]) if loc else "unknown"
        errors.append({"field": field, "message": err.get("msg", "Invalid value.")})
    return JSONResponse(status_code=422, content={"detail": "Validation error.", "errors": errors})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Catch-all: log the real error, return a safe generic message."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "An internal error occurred."})


@app.get("/health")
async def health():
    """Liveness only; upstream health is reported per request."""
    return {"status": "healthy"}
