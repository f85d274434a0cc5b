import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tasktrail.config import Settings, get_settings
from tasktrail.domain.exceptions import StorageFailureError
from tasktrail.infrastructure.database import (
    build_engine,
    build_session_factory,
    initialize_database,
)
from tasktrail.infrastructure.logging_config import configure_logging
from tasktrail.interfaces.api.middleware import RequestLoggingMiddleware
from tasktrail.interfaces.api.routes import register_routes

logger = logging.getLogger("tasktrail.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Inicializa la base de datos al arrancar y libera los recursos al cerrar."""

    initialize_database(app.state.engine)
    yield
    app.state.engine.dispose()


async def _storage_failure_handler(request: Request, exc: StorageFailureError) -> JSONResponse:
    logger.error(
        "Storage failure while handling %s %s",
        request.method,
        request.url.path,
        extra={"request_id": request.scope.get("request_id")},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Crea y configura la aplicación principal de FastAPI.

    Cada instancia es dueña de su motor de base de datos, de modo que las
    pruebas pueden construir aplicaciones aisladas con ``settings`` propios.
    """

    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Tasktrail API", lifespan=lifespan)
    engine = build_engine(settings.database_url)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_exception_handler(StorageFailureError, _storage_failure_handler)

    register_routes(app)
    return app


app = create_app()
