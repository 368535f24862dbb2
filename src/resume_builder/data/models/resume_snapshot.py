from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from resume_builder.data.db import Base


class ResumeSnapshot(Base):
    """
    A resume as submitted by the client, stored as camelCase JSON.
    """

    __tablename__ = "resume_snapshots"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Creation time in epoch milliseconds, as a string.
    key: Mapped[str] = mapped_column(String(32), nullable=False, unique=True, index=True)
    payload: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )
