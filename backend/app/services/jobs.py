# app/services/jobs.py
from __future__ import annotations

import logging
from typing import Any, Optional

from sqlalchemy import desc
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.database import is_unique_violation
from app.core.errors import Conflict, NotFound
from app.models.job import Job

logger = logging.getLogger(__name__)


def get_job(db: Session, job_id: str) -> Optional[Job]:
    return db.query(Job).filter(Job.id == job_id).first()


def require_job(db: Session, job_id: str) -> Job:
    job = get_job(db, job_id)
    if job is None:
        raise NotFound("Job not found")
    return job


def list_jobs(db: Session) -> list[Job]:
    return db.query(Job).order_by(desc(Job.created_at), Job.id).all()


def create_job(db: Session, data: dict[str, Any]) -> Job:
    fields = {k: v for k, v in data.items() if v is not None}
    if fields.get("id") and get_job(db, fields["id"]) is not None:
        raise Conflict("A job with that id already exists")

    job = Job(**fields)
    db.add(job)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if not is_unique_violation(exc, "jobs_pkey", "UNIQUE constraint failed: jobs.id"):
            raise
        raise Conflict("A job with that id already exists")
    db.refresh(job)
    logger.info("Created job id=%s", job.id)
    return job
