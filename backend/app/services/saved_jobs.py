# app/services/saved_jobs.py
"""
Saved-job relationship between a user and a job.

Every operation is scoped to the caller's user id. A user saves a given job at
most once: the unique constraint on (user_id, job_id) is the enforcement
point, and the pre-insert lookup only exists to produce the same Conflict
without a failed write in the common case.
"""
from __future__ import annotations

import logging

from sqlalchemy import desc
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from app.core.database import is_unique_violation
from app.core.errors import Conflict, ValidationError
from app.models.saved_job import SavedJob
from app.services.jobs import require_job

logger = logging.getLogger(__name__)

ALREADY_SAVED_MESSAGE = "Job already saved"
SAVED_JOB_UNIQUE_MARKERS = (
    "uq_saved_jobs_user_id_job_id",
    "UNIQUE constraint failed: saved_jobs.user_id, saved_jobs.job_id",
)


def list_saved_jobs(db: Session, user_id: str) -> list[SavedJob]:
    return (
        db.query(SavedJob)
        .options(joinedload(SavedJob.job))
        .filter(SavedJob.user_id == user_id)
        .order_by(desc(SavedJob.created_at), desc(SavedJob.id))
        .all()
    )


def find_saved_job(db: Session, user_id: str, job_id: str) -> SavedJob | None:
    return (
        db.query(SavedJob)
        .filter(SavedJob.user_id == user_id, SavedJob.job_id == job_id)
        .first()
    )


def save_job(db: Session, user_id: str, job_id: str | None) -> SavedJob:
    if not job_id:
        raise ValidationError("Job ID is required")

    require_job(db, job_id)

    if find_saved_job(db, user_id, job_id) is not None:
        raise Conflict(ALREADY_SAVED_MESSAGE)

    saved = SavedJob(user_id=user_id, job_id=job_id)
    db.add(saved)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if not is_unique_violation(exc, *SAVED_JOB_UNIQUE_MARKERS):
            # Foreign key failures: the user or job row vanished after issuance/lookup.
            logger.warning("Save rejected by integrity check user_id=%s job_id=%s", user_id, job_id)
            raise
        # A concurrent save for the same pair won between our lookup and insert.
        logger.info("Duplicate save caught by constraint user_id=%s job_id=%s", user_id, job_id)
        raise Conflict(ALREADY_SAVED_MESSAGE)
    db.refresh(saved)
    return saved


def unsave_job(db: Session, user_id: str, job_id: str) -> bool:
    """
    Delete the caller's save for ``job_id``. Returns False when there was
    nothing to delete; that is not an error.
    """
    deleted = (
        db.query(SavedJob)
        .filter(SavedJob.user_id == user_id, SavedJob.job_id == job_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted > 0
