from __future__ import annotations

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from app.auth.identity import Identity
from app.core.database import get_db
from app.dependencies.auth import require_roles
from app.schemas.application import ApplicationCreate, ApplicationOut
from app.services.applications import (
    apply_to_job,
    list_applications_for_applicant,
    list_applications_for_job,
)

router = APIRouter(prefix="/applications", tags=["applications"])


@router.post("", response_model=ApplicationOut, status_code=status.HTTP_201_CREATED)
def submit_application(
    payload: ApplicationCreate = Body(default_factory=ApplicationCreate),
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_roles("employee")),
):
    return apply_to_job(db, identity.user_id, payload.job_id, payload.cover_letter)


@router.get("", response_model=list[ApplicationOut])
def my_applications(
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_roles("employee")),
):
    return list_applications_for_applicant(db, identity.user_id)


@router.get(
    "/job/{job_id}",
    response_model=list[ApplicationOut],
    dependencies=[Depends(require_roles("employer"))],
)
def job_applications(job_id: str, db: Session = Depends(get_db)):
    return list_applications_for_job(db, job_id)
