# src/pager_admin/main.py
"""Main entry point for the Pager Admin application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from pager_admin.api.v1 import (
    administrator_groups_router,
    administrators_router,
    attachments_router,
    contact_groups_router,
    contacts_router,
    contacts_status_router,
    settings_router,
    templates_router,
)
from pager_admin.core.settings import settings
from pager_admin.services.errors import ServiceError

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Administration API for enterprise paging and dispatch",
    version=settings.app_version,
    debug=settings.debug,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
app.include_router(administrators_router, prefix="/api/v1")
app.include_router(administrator_groups_router, prefix="/api/v1")
app.include_router(contacts_router, prefix="/api/v1")
app.include_router(contact_groups_router, prefix="/api/v1")
app.include_router(contacts_status_router, prefix="/api/v1")
app.include_router(templates_router, prefix="/api/v1")
app.include_router(settings_router, prefix="/api/v1")
app.include_router(attachments_router, prefix="/api/v1")


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Translate service-layer errors into JSON responses."""
    logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("pager_admin.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
