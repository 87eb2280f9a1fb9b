from typing import Optional
from fastapi import Depends, HTTPException, Query, Request, status
from sqlalchemy.orm import Session
from inventory_api.core.db import get_session
from inventory_api.models.user import User
from inventory_api.services.auth import Permission, role_allows
from inventory_api.services.user import UserService
import logging

logger = logging.getLogger(__name__)

INSUFFICIENT_RIGHTS = "Недостаточно прав для выполнения операции"


def get_request_token(request: Request, token: Optional[str] = Query(None)) -> Optional[str]:
    if token:
        return token

    authorization = request.headers.get("Authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return None


def get_current_user(
    request: Request,
    token: Optional[str] = Depends(get_request_token),
    db: Session = Depends(get_session),
) -> Optional[User]:
    user = UserService(db).get_user_by_token(token)
    if user:
        request.state.user = {"user_id": user.id, "username": user.username, "role": user.role}
    return user


def _require(permission: str):
    def dependency(current_user: Optional[User] = Depends(get_current_user)) -> User:
        if current_user is None or not role_allows(current_user.role, permission):
            logger.warning(f"Access denied: {permission} permission required")
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INSUFFICIENT_RIGHTS)
        return current_user

    return dependency


require_read = _require(Permission.READ)
require_write = _require(Permission.WRITE)
require_admin = _require(Permission.ADMIN)
