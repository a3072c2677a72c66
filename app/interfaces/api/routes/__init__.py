from fastapi import FastAPI

from .auth import router as auth_router
from .extensions import router as extensions_router
from .template_kits import router as template_kits_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(auth_router)
    app.include_router(template_kits_router)
    app.include_router(extensions_router)
