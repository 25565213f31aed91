"""
FastAPI application.

``app`` is what uvicorn serves (``cadence.main:app``).
"""

from fastapi import FastAPI

from cadence.api.middleware import RequestIDMiddleware
from cadence.api.v1.router import api_router
from cadence.core.config import settings
from cadence.core.error_handlers import register_error_handlers
from cadence.core.logging import configure_logging


def create_app() -> FastAPI:
    configure_logging()

    application = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION,
                          description="Recurring training session scheduling and completion tracking.")

    register_error_handlers(application)
    application.add_middleware(RequestIDMiddleware)
    application.include_router(api_router, prefix="/api/v1")

    @application.get("/")
    async def root():
        return {"service": settings.PROJECT_NAME, "version": settings.VERSION, "docs": "/docs"}

    @application.get("/health")
    async def health_check():
        """Liveness probe (does not touch the database)."""
        return {"status": "healthy", "version": settings.VERSION}

    return application


app = create_app()
