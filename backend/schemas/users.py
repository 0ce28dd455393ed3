from typing import Literal, NewType, Optional

from pydantic import EmailStr, constr

from backend.core.schemas import CamelModel

# helper types
Username = NewType("Username", constr(strip_whitespace=True, min_length=2, max_length=64))
Password = NewType("Password", constr(min_length=6, max_length=128))
Role = Literal["admin", "manager", "accountant", "user"]


class UserCreate(CamelModel):
    username: Username
    email: Optional[EmailStr] = None
    password: Password
    role: Role = "user"
