from app.models.user import User
from app.models.job import Job
from app.models.saved_job import SavedJob
from app.models.application import Application

__all__ = ["User", "Job", "SavedJob", "Application"]
