from fastapi import FastAPI

from .json_api import router as api_router
from .inbox import router as inbox_router


def register_routes(app: FastAPI) -> None:
    """Registra todos los routers de la API en la aplicación FastAPI."""

    app.include_router(inbox_router)
    app.include_router(api_router)
