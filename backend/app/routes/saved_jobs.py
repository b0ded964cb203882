from __future__ import annotations

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from app.auth.identity import Identity
from app.core.database import get_db
from app.dependencies.auth import require_identity
from app.schemas.saved_job import SavedJobCreate, SavedJobOut, SavedJobWithJobOut, UnsaveOut
from app.services.saved_jobs import list_saved_jobs, save_job, unsave_job


router = APIRouter(prefix="/saved-jobs", tags=["saved-jobs"], dependencies=[Depends(require_identity)])


@router.get("", response_model=list[SavedJobWithJobOut])
def get_saved_jobs(db: Session = Depends(get_db), identity: Identity = Depends(require_identity)):
    return list_saved_jobs(db, identity.user_id)


@router.post("", response_model=SavedJobOut, status_code=status.HTTP_201_CREATED)
def create_saved_job(
    payload: SavedJobCreate = Body(default_factory=SavedJobCreate),
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_identity),
):
    return save_job(db, identity.user_id, payload.job_id)


@router.delete("/{job_id}", response_model=UnsaveOut)
def delete_saved_job(
    job_id: str,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_identity),
):
    return {"deleted": unsave_job(db, identity.user_id, job_id)}
