from datetime import datetime, timezone, timedelta
from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy import and_
from inventory_api.models.user import User
from inventory_api.services.auth import AuthService, Permission, role_allows
from inventory_api.core.config import settings
import logging

logger = logging.getLogger(__name__)


class UserService:

    def __init__(self, db: Session, auth_service: Optional[AuthService] = None):
        self.db = db
        self.auth_service = auth_service or AuthService()

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def authenticate(self, username: str, password: str) -> Optional[User]:
        user = self.get_user_by_username(username)
        if not user:
            logger.warning(f"Login attempt for unknown user: {username}")
            return None
        if not self.auth_service.verify_password(password, user.password):
            logger.warning(f"Invalid credentials for {username}")
            return None
        return user

    def get_user_by_token(self, token: Optional[str]) -> Optional[User]:
        """Resolve a session token to its user.

        The token has to verify, and it has to be the one currently stored on
        the user row, so a newer login or a logout invalidates it.
        """
        if not token:
            return None

        payload = self.auth_service.verify_session_token(token)
        if not payload:
            return None

        user = self.db.query(User).filter(User.token == token).first()
        if not user or str(user.id) != payload.get("sub"):
            return None

        if user.session_expires is not None:
            expires = user.session_expires
            if expires.tzinfo is None:
                expires = expires.replace(tzinfo=timezone.utc)
            if expires < datetime.now(timezone.utc):
                return None

        return user

    def resolve_role(self, token: Optional[str]) -> Optional[str]:
        user = self.get_user_by_token(token)
        return user.role if user else None

    def can_read(self, token: Optional[str]) -> bool:
        return role_allows(self.resolve_role(token), Permission.READ)

    def can_write(self, token: Optional[str]) -> bool:
        return role_allows(self.resolve_role(token), Permission.WRITE)

    def update_user_login(self,
                          user: User,
                          session_token: str,
                          ip_address: Optional[str] = None) -> User:
        session_expire_time = datetime.now(timezone.utc) + timedelta(hours=settings.session_expire_hours)

        user.last_login = datetime.now(timezone.utc)
        user.token = session_token
        user.session_expires = session_expire_time
        user.login_count = (user.login_count or 0) + 1
        user.last_ip = ip_address

        self.db.commit()
        self.db.refresh(user)

        logger.info(f"Updated login for user: {user.username}")
        return user

    def invalidate_session(self, user: User) -> None:
        user.token = None
        user.session_expires = None

        self.db.commit()
        logger.info(f"Invalidated session for user: {user.username}")

    def cleanup_expired_sessions(self) -> int:
        try:
            now = datetime.now(timezone.utc)
            expired_users = self.db.query(User).filter(
                and_(
                    User.session_expires < now,
                    User.token.isnot(None)
                )
            ).all()

            count = 0
            for user in expired_users:
                user.token = None
                user.session_expires = None
                count += 1

            self.db.commit()

            if count > 0:
                logger.info(f"Cleaned up {count} expired user sessions")

            return count

        except Exception as e:
            logger.error(f"Error cleaning up expired sessions: {e}")
            self.db.rollback()
            return 0
