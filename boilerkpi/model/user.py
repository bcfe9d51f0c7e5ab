from pydantic import EmailStr

from .base import BaseModel


class UserAccount(BaseModel):
    id: str
    username: EmailStr
    full_name: str
    role: str = ""
    department: str = ""
    avatar: str | None = None
    password_hash: str | None = None
