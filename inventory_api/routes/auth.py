import logging

from fastapi import APIRouter, Request, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from inventory_api.core.db import get_session
from inventory_api.models.schemas import LoginRequest, LoginResponse
from inventory_api.services.auth import AuthService
from inventory_api.services.user import UserService
from inventory_api.dependencies.auth import get_current_user, INSUFFICIENT_RIGHTS

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    request: Request,
    credentials: LoginRequest,
    db: Session = Depends(get_session),
):
    if not credentials.username or not credentials.password:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Логин и пароль обязательны для заполнения")

    try:
        user_service = UserService(db)
        auth_service = AuthService()

        db_user = user_service.authenticate(credentials.username, credentials.password)
        if not db_user:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Неверный логин или пароль")

        session_token = auth_service.create_session_token(
            {"user_id": db_user.id, "username": db_user.username, "role": db_user.role}
        )

        client_ip = request.client.host if request.client else None
        user_service.update_user_login(user=db_user, session_token=session_token, ip_address=client_ip)

        logger.info(f"User {db_user.username} logged in with role {db_user.role}")
        return LoginResponse(token=session_token, role=db_user.role, full_name=db_user.full_name)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Login error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Ошибка сервера при авторизации. Попробуйте позже",
        )


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(db: Session = Depends(get_session), current_user=Depends(get_current_user)):
    if current_user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INSUFFICIENT_RIGHTS)

    try:
        UserService(db).invalidate_session(current_user)
    except Exception as e:
        logger.error(f"Error during logout: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Внутренняя ошибка сервера")

    return Response(status_code=status.HTTP_204_NO_CONTENT)
