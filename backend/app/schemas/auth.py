# app/schemas/auth.py
from typing import List, Optional

from app.schemas.base import CamelModel
from app.schemas.user import PublicUserOut


# Required fields are optional here so a missing one is reported as a 400
# by the identity service rather than a 422 from request parsing.
class RegisterIn(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    role: Optional[str] = None
    phone: Optional[str] = None
    company_name: Optional[str] = None
    skills: Optional[List[str]] = None


class LoginIn(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None


class AuthOut(CamelModel):
    token: str
    user: PublicUserOut
