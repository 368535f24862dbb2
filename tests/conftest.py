from __future__ import annotations

from pathlib import Path

import pytest

import resume_builder.data.db as app_db
from resume_builder.data.db import init_db


@pytest.fixture(autouse=True)
def draft_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point the draft slot at a temp file and keep autosave out of the way."""
    draft_path = tmp_path / "drafts" / "resume-draft.json"
    monkeypatch.setenv("RESUME_DRAFT_PATH", draft_path.as_posix())
    monkeypatch.setenv("AUTOSAVE_INTERVAL_SECONDS", "3600")
    monkeypatch.delenv("LLM_PROVIDER", raising=False)
    return draft_path


@pytest.fixture
def api_db(monkeypatch: pytest.MonkeyPatch) -> None:
    """Use a fresh in-memory SQLite DB for API tests."""
    monkeypatch.setenv("DB_URL", "sqlite://")
    app_db.reset_db()
    init_db()
    yield
    # Dispose engine to release connections
    app_db.reset_db()


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Automatically add api_db fixture to tests in API test files."""
    for item in items:
        # Check if test file name contains "api" (case-insensitive)
        test_file_path = Path(str(item.fspath))
        if "api" in test_file_path.stem.lower():
            item.add_marker(pytest.mark.usefixtures("api_db"))
