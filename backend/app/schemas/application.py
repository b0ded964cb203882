from datetime import datetime
from typing import Optional

from app.schemas.base import CamelModel


class ApplicationCreate(CamelModel):
    job_id: Optional[str] = None
    cover_letter: Optional[str] = None


class ApplicationOut(CamelModel):
    id: int
    job_id: str
    applicant_id: str
    cover_letter: Optional[str] = None
    status: str
    applied_at: datetime
