"""ORM models package for database tables.

- ResumeSnapshot: a full resume saved through ``POST /api/resumes``

All models inherit from the shared Base declarative class defined in data.db.
"""

from resume_builder.data.db import Base
from resume_builder.data.models.resume_snapshot import ResumeSnapshot

__all__ = ["Base", "ResumeSnapshot"]
