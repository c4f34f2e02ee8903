# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# Assembles the portal API: logging, CORS, the body size cap, error
# handlers and the /api/portal router.
#
# Run locally:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import (
    PortalException,
    portal_exception_handler,
    validation_exception_handler,
)
from app.middleware import limit_body_size
from app.routers import portal

# Root logger; modules log through logging.getLogger(__name__)
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the static configuration on startup and a line on shutdown."""
    logger.info(f"Starting {settings.APP_NAME} portal API in {settings.ENVIRONMENT} mode")
    logger.info(f"Body size limit: {settings.ACTIONS_BODY_SIZE_LIMIT} ({settings.body_size_limit_bytes} bytes)")
    logger.info(f"Remote image patterns: {settings.IMAGE_REMOTE_PATTERNS}")

    yield

    logger.info(f"Shutting down {settings.APP_NAME} portal API")


app = FastAPI(
    title=f"{settings.APP_NAME} Portal API",
    description="""
## Subscriber Portal API

Session endpoints for the ISP subscriber portal.

### Endpoints

| Endpoint | Purpose |
|----------|---------|
| `POST /api/portal/logout` | Clear the portal session cookie |
| `GET /api/portal/session` | Current subscriber session |
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Portal",
            "description": "Subscriber portal session endpoints",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# Any origin outside production
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Request body size cap for mutating requests
app.middleware("http")(limit_body_size)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(PortalException)
async def handle_portal_exception(request: Request, exc: PortalException):
    """Handle custom portal exceptions."""
    return await portal_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle request validation errors."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Last resort: log the traceback and hide the details."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Subscriber portal session endpoints
app.include_router(
    portal.router,
    prefix="/api/portal",
    tags=["Portal"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """Service name and docs location."""
    return {
        "name": f"{settings.APP_NAME} Portal API",
        "version": "1.0.0",
        "docs": "/docs",
    }
