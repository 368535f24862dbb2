"""FastAPI application entry point for the resume builder API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from resume_builder import __version__
from resume_builder.api.routes import ai, draft, export, health, resumes, roles, wizard
from resume_builder.config import get_draft_path
from resume_builder.exceptions import PersistenceError
from resume_builder.services.draft_store import Autosaver, DraftStore
from resume_builder.services.wizard import ResumeWizard

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load the draft and start autosave on startup.

    On shutdown the draft is saved once more and the snapshot database,
    which only lives as long as the process, is released.
    """
    from resume_builder.data.db import init_db, reset_db

    init_db()

    store = DraftStore(get_draft_path())
    store.load()
    autosaver = Autosaver(store)
    app.state.draft_store = store
    app.state.wizard = ResumeWizard(store)
    app.state.autosaver = autosaver
    autosaver.start()
    try:
        yield
    finally:
        await autosaver.stop()
        try:
            store.save()
        except PersistenceError:
            logger.exception("Final draft save failed")
        reset_db()


app = FastAPI(
    title="Resume Builder API",
    description="API for building, scoring and exporting resumes step by step",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(ai.router, prefix="/api")
app.include_router(ai.skills_router, prefix="/api")
app.include_router(resumes.router, prefix="/api")
app.include_router(draft.router, prefix="/api")
app.include_router(wizard.router, prefix="/api")
app.include_router(export.router, prefix="/api")
app.include_router(roles.router, prefix="/api")


def main() -> None:
    """Start the development server."""
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    uvicorn.run(
        "resume_builder.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
