# app/models/user.py
import uuid

from sqlalchemy import Column, DateTime, String, Text, func
from sqlalchemy.orm import relationship
from sqlalchemy.types import JSON

from app.core.base import Base

DEFAULT_ROLE = "employee"


def generate_user_id() -> str:
    return uuid.uuid4().hex


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_user_id)

    # Exact-match lookups; stored as supplied.
    email = Column(String(255), unique=True, index=True, nullable=False)
    name = Column(String(100), nullable=False)
    # Never serialized; only app.services.identity reads it.
    password_hash = Column(String(255), nullable=False)
    # employee | employer (not enforced; unknown strings are stored as given)
    role = Column(String(30), nullable=False, default=DEFAULT_ROLE, server_default=DEFAULT_ROLE)

    phone = Column(String(50), nullable=True)
    company_name = Column(String(255), nullable=True)
    skills = Column(JSON, nullable=True)
    professional_title = Column(String(255), nullable=True)
    location = Column(String(255), nullable=True)
    bio = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    saved_jobs = relationship(
        "SavedJob",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    applications = relationship(
        "Application",
        back_populates="applicant",
        cascade="all, delete-orphan",
    )
