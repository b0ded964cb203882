from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.base import Base


class Application(Base):
    __tablename__ = "applications"

    id = Column(Integer, primary_key=True, index=True)

    applicant_id = Column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    job_id = Column(
        String(64),
        ForeignKey("jobs.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    cover_letter = Column(Text, nullable=True)
    status = Column(String(30), nullable=False, server_default="submitted")

    applied_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    applicant = relationship("User", back_populates="applications")
    job = relationship("Job")

    __table_args__ = (
        UniqueConstraint("applicant_id", "job_id", name="uq_applications_applicant_id_job_id"),
    )
