"""Process-lifetime storage for resumes saved through the API."""

from __future__ import annotations

import time

from sqlalchemy.orm import Session

from resume_builder.data.db import get_session
from resume_builder.data.models import ResumeSnapshot
from resume_builder.services.resume_data import ResumeData


def _next_key(session: Session) -> str:
    """Current epoch milliseconds, bumped past any key already taken."""
    stamp = time.time_ns() // 1_000_000
    while session.query(ResumeSnapshot).filter(ResumeSnapshot.key == str(stamp)).first():
        stamp += 1
    return str(stamp)


def save_snapshot(data: ResumeData) -> str:
    """
    Store a copy of *data* and return the key it was saved under.

    Args:
        data: The resume to store

    Returns:
        The snapshot key (creation time in milliseconds)
    """
    with get_session() as session:
        key = _next_key(session)
        session.add(ResumeSnapshot(key=key, payload=data.model_dump_json(by_alias=True)))
        return key


def list_snapshots() -> list[ResumeData]:
    """Return every stored resume in the order it was saved."""
    with get_session() as session:
        rows = session.query(ResumeSnapshot).order_by(ResumeSnapshot.id).all()
        return [ResumeData.model_validate_json(row.payload) for row in rows]


def delete_snapshot(key: str) -> bool:
    """
    Delete the snapshot saved under *key*.

    Returns:
        True if a snapshot was deleted, False if the key was unknown
    """
    with get_session() as session:
        row = session.query(ResumeSnapshot).filter(ResumeSnapshot.key == key).first()
        if row is None:
            return False
        session.delete(row)
        return True
