# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Birds API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main
# =============================================================================

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.config import settings
from app.exceptions import (
    BirdsAPIException,
    birds_api_exception_handler,
    unhandled_exception_handler,
)
from app.routers import health, birds

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)
access_logger = logging.getLogger("app.access")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    The Supabase client is created lazily on first use, so there is nothing
    to open here; startup and shutdown are only logged.
    """
    logger.info(f"Starting Birds API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    yield

    logger.info("Shutting down Birds API")


# Create FastAPI application
app = FastAPI(
    title="Birds API",
    description="""
## Birds API

Create, list, fetch, update and delete birds.

| Method | Path | Result |
|--------|------|--------|
| GET | /birds | All birds (JSON or HTML) |
| POST | /birds | Created bird (JSON) |
| GET | /birds/{bird_id} | One bird (JSON or HTML) |
| PATCH | /birds/{bird_id} | Updated bird (JSON) |
| DELETE | /birds/{bird_id} | 204 No Content |

`PATCH` replaces both `title` and `description`; send both.
""",
    version=health.VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Birds",
            "description": "Bird records",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Write one access log line per request."""
    started = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        elapsed_ms = (time.perf_counter() - started) * 1000
        client = request.client.host if request.client else "-"
        access_logger.info(
            f'{client} "{request.method} {request.url.path}" {status_code} '
            f'{elapsed_ms:.1f}ms "{request.headers.get("user-agent", "-")}"'
        )


# =============================================================================
# Exception Handlers
# =============================================================================

app.add_exception_handler(BirdsAPIException, birds_api_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


# =============================================================================
# Routers
# =============================================================================

# Health check endpoints
app.include_router(
    health.router,
    tags=["Health"]
)

# Bird endpoints
app.include_router(
    birds.router,
    prefix="/birds",
    tags=["Birds"]
)

# Static assets for the HTML views
app.mount(
    "/static",
    StaticFiles(directory=str(settings.STATIC_DIR)),
    name="static",
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Birds API",
        "version": health.VERSION,
        "docs": "/docs",
        "birds": "/birds",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )
