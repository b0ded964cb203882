from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from app.schemas.base import CamelModel


class JobCreate(CamelModel):
    id: Optional[str] = Field(default=None, min_length=1, max_length=64)
    title: str = Field(min_length=1, max_length=255)
    company: str = Field(min_length=1, max_length=255)
    location: Optional[str] = None
    type: Optional[str] = None
    category: Optional[str] = None
    is_remote: Optional[bool] = None
    description: Optional[str] = None
    salary: Optional[Dict[str, Any]] = None
    skills: Optional[List[str]] = None


class JobOut(CamelModel):
    id: str
    title: str
    company: str
    location: Optional[str] = None
    type: Optional[str] = None
    category: Optional[str] = None
    is_remote: Optional[bool] = None
    description: Optional[str] = None
    salary: Optional[Dict[str, Any]] = None
    skills: Optional[List[str]] = None
    created_at: datetime
