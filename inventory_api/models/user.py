from datetime import datetime, timezone
from typing import Optional

from sqlmodel import Field, SQLModel, text, Column, String, DateTime, Index, UniqueConstraint


class UserBase(SQLModel):
    id: Optional[int] = None
    username: Optional[str] = Field(default=None, sa_type=String(50), nullable=False)
    role: Optional[str] = Field(default=None, sa_type=String(50), nullable=False)
    email: Optional[str] = Field(default=None, sa_type=String(100))
    last_name: Optional[str] = Field(default=None, sa_type=String(50), nullable=False)
    first_name: Optional[str] = Field(default=None, sa_type=String(50), nullable=False)
    middle_name: Optional[str] = Field(default=None, sa_type=String(50))
    phone: Optional[str] = Field(default=None, sa_type=String(20))
    address: Optional[str] = Field(default=None, sa_type=String(255))


class UserPayload(UserBase):
    """Incoming user body; the password is write-only."""
    password: Optional[str] = None


class UserRead(UserBase):
    pass


class User(UserBase, table=True):
    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("username", name="uq_users_username"),
        Index("idx_users_role", "role"),
        Index("idx_users_token", "token"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    password: Optional[str] = Field(default=None, sa_type=String(255), nullable=False)

    token: Optional[str] = Field(default=None, max_length=500)
    session_expires: Optional[datetime] = Field(default=None, sa_column=Column("session_expires", DateTime(timezone=True)))
    last_login: Optional[datetime] = Field(default=None, sa_column=Column("last_login", DateTime(timezone=True)))
    login_count: int = Field(default=0)
    last_ip: Optional[str] = Field(default=None, max_length=45)

    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_column=Column("created_at", DateTime(timezone=True), server_default=text("CURRENT_TIMESTAMP"))
    )

    @property
    def full_name(self) -> str:
        parts = [self.last_name, self.first_name, self.middle_name]
        return " ".join(part for part in parts if part)
