from typing import Optional

from sqlmodel import SQLModel


class DropdownItem(SQLModel):
    id: int
    display_text: str


class LoginRequest(SQLModel):
    username: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(SQLModel):
    token: str
    role: str
    full_name: str
