from fastapi import FastAPI

from .audit_logs import router as audit_logs_router
from .people import router as people_router
from .processes import router as processes_router
from .templates import router as templates_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(audit_logs_router)
    app.include_router(people_router)
    app.include_router(processes_router)
    app.include_router(templates_router)
