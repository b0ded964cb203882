from datetime import datetime
from typing import Optional

from app.schemas.base import CamelModel
from app.schemas.job import JobOut


class SavedJobCreate(CamelModel):
    # Checked by the service so a missing id is a 400, not a 422.
    job_id: Optional[str] = None


class SavedJobOut(CamelModel):
    id: int
    user_id: str
    job_id: str
    created_at: datetime


class SavedJobWithJobOut(SavedJobOut):
    job: Optional[JobOut] = None


class UnsaveOut(CamelModel):
    deleted: bool
