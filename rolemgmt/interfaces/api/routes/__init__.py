import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from rolemgmt.infrastructure.repositories import DataAccessError

from .roles import router as roles_router

logger = logging.getLogger(__name__)


async def _data_access_error_handler(request: Request, exc: DataAccessError) -> PlainTextResponse:
    logger.error("Error de acceso a datos en %s %s: %s", request.method, request.url.path, exc)
    return PlainTextResponse(str(exc), status_code=500)


def register_routes(app: FastAPI) -> None:
    """Registra todos los routers de la API en la aplicación FastAPI."""

    app.include_router(roles_router)
    app.add_exception_handler(DataAccessError, _data_access_error_handler)
