from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException
from fastapi.responses import JSONResponse

from inventory_api.core.config import settings
from inventory_api.core.db import SessionLocal, init_db
from inventory_api.resources import RESOURCES
from inventory_api.routes.resources import build_resource_router
from inventory_api.routes.auth import router as auth_router
from inventory_api.routes.dropdown import router as dropdown_router
from inventory_api.routes.export import router as export_router
from inventory_api.routes.audit_log import router as audit_log_router
from inventory_api.routes.health import router as health_router
from inventory_api.middleware.audit_logging import AuditLoggingMiddleware, INTERNAL_ERROR
from inventory_api.services.user import UserService

from inventory_api.audit.listeners import initialize_audit_listeners


logger = logging.getLogger(__name__)

INVALID_REQUEST = "Некорректные данные запроса"


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return INVALID_REQUEST
    first = errors[0]
    message = str(first.get("msg") or "")
    if first.get("type") == "value_error" and message.startswith("Value error, "):
        # raised by our own field validators, already human readable
        return message[len("Value error, "):]
    field = first.get("loc", ())[-1] if first.get("loc") else None
    return f"{INVALID_REQUEST}: {field}" if field and field != "body" else INVALID_REQUEST


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("App starting up")
    if settings.auto_create_schema:
        logger.info("Creating database schema...")
        init_db()
    if settings.audit_enabled:
        logger.info("Initializing audit listeners...")
        initialize_audit_listeners()
        logger.info("Audit listeners initialized.")
    with SessionLocal() as db:
        UserService(db).cleanup_expired_sessions()
    yield
    logger.info("App shutting down...")


def create_app() -> FastAPI:
    app = FastAPI(title="Equipment Accounting API", version="1.0.0", lifespan=lifespan)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"detail": _validation_message(exc)})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"detail": INTERNAL_ERROR})

    if settings.audit_enabled:
        app.add_middleware(AuditLoggingMiddleware)

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(dropdown_router)
    app.include_router(audit_log_router)
    # /api/equipment/export has to be matched before /api/equipment/{item_id}
    app.include_router(export_router)
    for definition in RESOURCES:
        app.include_router(build_resource_router(definition))

    return app
