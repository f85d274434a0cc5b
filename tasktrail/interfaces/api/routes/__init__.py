from fastapi import FastAPI

from .audit_logs import router as audit_logs_router
from .auth import router as auth_router
from .health import router as health_router
from .tasks import router as tasks_router


def register_routes(app: FastAPI) -> None:
    """Registra todos los routers de la API en la aplicación FastAPI."""

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(tasks_router)
    app.include_router(audit_logs_router)
