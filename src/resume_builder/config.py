"""Runtime configuration read from the environment.

Values come from environment variables; a ``.env`` file in the working
directory is loaded first so local overrides need no shell exports.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DEFAULT_AUTOSAVE_INTERVAL = 30.0
DRAFT_FILENAME = "resume-draft.json"


def get_draft_path() -> Path:
    """Return the location of the persisted draft slot.

    Overridden by ``RESUME_DRAFT_PATH``; defaults to
    ``~/.resume_builder/resume-draft.json``.
    """
    env_path = os.getenv("RESUME_DRAFT_PATH")
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / ".resume_builder" / DRAFT_FILENAME


def get_autosave_interval() -> float:
    """Return the autosave period in seconds (``AUTOSAVE_INTERVAL_SECONDS``)."""
    raw = os.getenv("AUTOSAVE_INTERVAL_SECONDS")
    if not raw:
        return DEFAULT_AUTOSAVE_INTERVAL
    try:
        interval = float(raw)
    except ValueError:
        return DEFAULT_AUTOSAVE_INTERVAL
    return interval if interval > 0 else DEFAULT_AUTOSAVE_INTERVAL
