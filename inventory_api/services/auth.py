from datetime import datetime, timezone, timedelta
from typing import Optional, Dict, Any
import secrets
import string
from jose import JWTError, jwt
from werkzeug.security import generate_password_hash, check_password_hash
from inventory_api.core.config import settings
import logging

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
TOKEN_ID_LENGTH = 32
TOKEN_ID_ALPHABET = string.ascii_letters + string.digits


class UserRole:
    EMPLOYEE = "employee"
    TEACHER = "teacher"
    ADMINISTRATOR = "administrator"

    ALL = (EMPLOYEE, TEACHER, ADMINISTRATOR)


class Permission:
    READ = "read"
    WRITE = "write"
    ADMIN = "admin"


ROLE_PERMISSIONS = {
    UserRole.EMPLOYEE: {Permission.READ},
    UserRole.TEACHER: {Permission.READ, Permission.WRITE},
    UserRole.ADMINISTRATOR: {Permission.READ, Permission.WRITE, Permission.ADMIN},
}


def role_allows(role: Optional[str], permission: str) -> bool:
    return permission in ROLE_PERMISSIONS.get(role, set())


class AuthService:
    def hash_password(self, password: str) -> str:
        return generate_password_hash(password)

    def verify_password(self, password: str, password_hash: Optional[str]) -> bool:
        if not password_hash:
            return False
        try:
            return check_password_hash(password_hash, password)
        except ValueError:
            # stored value is not a werkzeug hash
            logger.warning("Stored password is not a recognised hash")
            return False

    def generate_token_id(self) -> str:
        return "".join(secrets.choice(TOKEN_ID_ALPHABET) for _ in range(TOKEN_ID_LENGTH))

    def create_session_token(self, user_data: Dict[str, Any]) -> str:
        session_data = {
            "sub": str(user_data.get("user_id")),
            "username": user_data.get("username"),
            "role": user_data.get("role"),
            "jti": self.generate_token_id(),
            "exp": (datetime.now(timezone.utc) + timedelta(hours=settings.session_expire_hours)).timestamp()
        }

        token = jwt.encode(session_data, settings.secret_key, algorithm=ALGORITHM)
        return token

    def verify_session_token(self, token: str) -> Optional[Dict[str, Any]]:
        try:
            payload = jwt.decode(token, settings.secret_key, algorithms=[ALGORITHM])

            if datetime.now(timezone.utc).timestamp() > payload.get('exp', 0):
                return None

            return payload

        except JWTError as e:
            logger.debug(f"Session token verification failed: {e}")
            return None
