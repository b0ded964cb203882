# app/services/applications.py
from __future__ import annotations

import logging

from sqlalchemy import desc
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.database import is_unique_violation
from app.core.errors import Conflict, ValidationError
from app.models.application import Application
from app.services.jobs import require_job

logger = logging.getLogger(__name__)

ALREADY_APPLIED_MESSAGE = "Already applied to this job"
APPLICATION_UNIQUE_MARKERS = (
    "uq_applications_applicant_id_job_id",
    "UNIQUE constraint failed: applications.applicant_id, applications.job_id",
)


def apply_to_job(
    db: Session,
    applicant_id: str,
    job_id: str | None,
    cover_letter: str | None = None,
) -> Application:
    if not job_id:
        raise ValidationError("Job ID is required")

    require_job(db, job_id)

    exists = (
        db.query(Application.id)
        .filter(Application.applicant_id == applicant_id, Application.job_id == job_id)
        .first()
    )
    if exists:
        raise Conflict(ALREADY_APPLIED_MESSAGE)

    application = Application(
        applicant_id=applicant_id,
        job_id=job_id,
        cover_letter=cover_letter,
        status="submitted",
    )
    db.add(application)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if not is_unique_violation(exc, *APPLICATION_UNIQUE_MARKERS):
            logger.warning("Application rejected by integrity check applicant_id=%s job_id=%s", applicant_id, job_id)
            raise
        raise Conflict(ALREADY_APPLIED_MESSAGE)
    db.refresh(application)

    logger.info("Application submitted id=%s job_id=%s", application.id, job_id)
    return application


def list_applications_for_applicant(db: Session, applicant_id: str) -> list[Application]:
    return (
        db.query(Application)
        .filter(Application.applicant_id == applicant_id)
        .order_by(desc(Application.applied_at), desc(Application.id))
        .all()
    )


def list_applications_for_job(db: Session, job_id: str) -> list[Application]:
    require_job(db, job_id)
    return (
        db.query(Application)
        .filter(Application.job_id == job_id)
        .order_by(desc(Application.applied_at), desc(Application.id))
        .all()
    )
