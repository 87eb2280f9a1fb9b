import time
import logging
from datetime import datetime, timezone
from typing import Callable, Optional, Dict, Any
from fastapi import Request, Response, BackgroundTasks
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from sqlalchemy.orm import Session
from inventory_api.core.db import SessionLocal
from inventory_api.models.audit_log import AuditLog
from inventory_api.services.user import UserService
from inventory_api.audit.context import audit_context

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Внутренняя ошибка сервера"


def log_to_database(log_data: dict):
    db: Session = SessionLocal()
    try:
        current_user = log_data.pop("current_user", None)
        user_id = None
        username = None

        if current_user:
            username = current_user.get("username")
            user_id = current_user.get("user_id")

        audit_log = AuditLog(**log_data, user_id=user_id, username=username, timestamp=datetime.now(timezone.utc))
        db.add(audit_log)
        db.commit()
    except Exception as e:
        logger.error(f"Failed to save audit log: {e}")
        db.rollback()
    finally:
        db.close()


def _content_length(headers) -> int:
    try:
        return int(headers.get("content-length", 0))
    except (ValueError, TypeError):
        return 0


class AuditLoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, skip_paths: list = None):
        super().__init__(app)
        self.skip_paths = skip_paths or ["/docs", "/redoc", "/openapi.json", "/health", "/favicon.ico"]

    def _get_request_user(self, request: Request) -> Optional[Dict[str, Any]]:
        token = request.query_params.get("token")
        if not token:
            scheme, _, credentials = request.headers.get("authorization", "").partition(" ")
            token = credentials.strip() if scheme.lower() == "bearer" else None
        if not token:
            return None

        with SessionLocal() as db:
            user = UserService(db).get_user_by_token(token)
            if user is None:
                return None
            return {"user_id": str(user.id), "username": user.username}

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if any(request.url.path.startswith(skip) for skip in self.skip_paths):
            return await call_next(request)

        current_user = self._get_request_user(request)
        context_data = {
            "method": request.method,
            "path": request.url.path,
            "remote_addr": self._get_client_ip(request),
            "user_id": current_user.get("user_id") if current_user else None,
            "username": current_user.get("username") if current_user else None,
            "user_agent": request.headers.get("user-agent"),
        }

        token = audit_context.set(context_data)

        start_time = time.time()
        error_message = None
        status_code = 500
        response_body_size = 0

        try:
            response = await call_next(request)
            status_code = response.status_code
            response_body_size = _content_length(response.headers)

        except Exception as e:
            error_message = str(e)
            response = JSONResponse(status_code=500, content={"detail": INTERNAL_ERROR})
            logger.exception(f"Error processing request {request.method} {request.url.path}: {error_message}")
        finally:
            response_time_ms = (time.time() - start_time) * 1000

            log_data_for_access_log = {
                "method": request.method,
                "path": request.url.path,
                "query_params": self._safe_query(request),
                "user_agent": request.headers.get("user-agent"),
                "remote_addr": self._get_client_ip(request),
                "status_code": status_code,
                "response_time_ms": response_time_ms,
                "error_message": error_message,
                "request_body_size": _content_length(request.headers),
                "response_body_size": response_body_size,
                "current_user": current_user,
            }

            if getattr(response, "background", None) is None:
                response.background = BackgroundTasks()
            response.background.add_task(log_to_database, log_data=log_data_for_access_log)

            audit_context.reset(token)

        return response

    def _safe_query(self, request: Request) -> Optional[str]:
        params = [(key, "***" if key == "token" else value) for key, value in request.query_params.multi_items()]
        if not params:
            return None
        return "&".join(f"{key}={value}" for key, value in params)

    def _get_client_ip(self, request: Request) -> str:
        forwarded_for = request.headers.get("x-forwarded-for")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()

        real_ip = request.headers.get("x-real-ip")
        if real_ip:
            return real_ip

        return request.client.host if request.client else "unknown"
