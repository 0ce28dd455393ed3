from typing import Optional

from backend.core.schemas import CamelModel


class LoginPayload(CamelModel):
    username: str
    password: str


class UserOut(CamelModel):
    id: int
    username: str
    email: Optional[str] = None
    role: str


class LoginResponse(CamelModel):
    token: str
    user: UserOut
