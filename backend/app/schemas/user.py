from __future__ import annotations

from app.schemas.base import CamelModel


class PublicUserOut(CamelModel):
    id: str
    email: str
    name: str
    role: str
    company_name: str | None = None
    skills: list[str] | None = None


class UserMeOut(PublicUserOut):
    phone: str | None = None
