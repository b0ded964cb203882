# app/models/job.py
import uuid

from sqlalchemy import Boolean, Column, DateTime, String, Text, func
from sqlalchemy.types import JSON

from app.core.base import Base


class Job(Base):
    __tablename__ = "jobs"

    id = Column(String(64), primary_key=True, default=lambda: uuid.uuid4().hex)

    title = Column(String(255), nullable=False)
    company = Column(String(255), nullable=False)
    location = Column(String(255), nullable=True)
    # full-time / part-time / contract ...
    type = Column(String(50), nullable=True)
    category = Column(String(100), nullable=True)
    is_remote = Column(Boolean, nullable=True)
    description = Column(Text, nullable=True)

    # {"min": ..., "max": ..., "currency": ...}
    salary = Column(JSON, nullable=True)
    skills = Column(JSON, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
