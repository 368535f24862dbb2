"""Local draft persistence for the in-progress resume.

The :class:`DraftStore` owns the single live :class:`ResumeData` for a
session.  Other components read ``store.current`` or derive a new draft with
:meth:`DraftStore.update`; nothing mutates the draft in place.

Writes go to a temporary file in the same directory which is then moved
over the slot with :func:`os.replace`, so a reader sees either the old or the
new draft, never a partial one.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import os
import tempfile
import threading
from collections.abc import Callable
from pathlib import Path

from pydantic import ValidationError

from resume_builder.config import get_autosave_interval
from resume_builder.exceptions import PersistenceError
from resume_builder.services.resume_data import ResumeData, default_resume

logger = logging.getLogger(__name__)

__all__ = ["Autosaver", "DraftStore"]


class DraftStore:
    """In-memory draft backed by one JSON file.

    Every change to the draft holds ``_lock`` from the read to the swap, so
    edits arriving on different threads cannot overwrite one another.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._current: ResumeData = default_resume()
        self._lock = threading.RLock()

    @property
    def current(self) -> ResumeData:
        return self._current

    def replace(self, data: ResumeData) -> None:
        """Swap the in-memory draft. Does not persist."""
        with self._lock:
            self._current = data

    def update(self, change: Callable[[ResumeData], ResumeData]) -> ResumeData:
        """Apply *change* to the current draft and make its result current.

        The read and the swap happen under one lock; *change* must not call
        back into a different store.
        """
        with self._lock:
            updated = change(self._current)
            self._current = updated
            return updated

    def clear(self) -> None:
        self.replace(default_resume())

    def load(self) -> ResumeData:
        """Read the persisted slot and make it the current draft.

        A missing or unreadable slot yields the empty default; the failure
        is logged and never raised.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("No saved draft at %s, starting fresh", self.path)
            data = default_resume()
        except UnicodeDecodeError as exc:
            logger.warning("Discarding draft at %s, not valid UTF-8: %s", self.path, exc)
            data = default_resume()
        except OSError:
            logger.exception("Failed to read draft from %s", self.path)
            data = default_resume()
        else:
            try:
                data = ResumeData.model_validate_json(raw)
            except ValidationError as exc:
                logger.warning("Discarding unreadable draft at %s: %s", self.path, exc)
                data = default_resume()

        self.replace(data)
        return data

    def save(self, data: ResumeData | None = None) -> None:
        """Persist *data* (or the current draft) atomically.

        The draft reference is taken once at call time; later calls to
        :meth:`replace` cannot affect a save that is already running.

        Raises:
            PersistenceError: If the slot cannot be written.
        """
        snapshot = self._current if data is None else data
        payload = snapshot.to_json()

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
        except OSError as exc:
            raise PersistenceError(f"Cannot write draft to {self.path}: {exc}") from exc

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self.path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                os.unlink(tmp_name)
            raise PersistenceError(f"Cannot write draft to {self.path}: {exc}") from exc

        logger.debug("Draft saved to %s", self.path)


class Autosaver:
    """Periodically saves a :class:`DraftStore` on the running event loop."""

    def __init__(self, store: DraftStore, interval: float | None = None) -> None:
        self.store = store
        self.interval = interval if interval is not None else get_autosave_interval()
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def tick(self) -> bool:
        """Attempt one save. Failures are logged, never raised."""
        try:
            self.store.save()
        except PersistenceError:
            logger.exception("Auto-save failed")
            return False
        logger.info("Auto-saved resume draft")
        return True

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            self.tick()

    def start(self) -> None:
        """Schedule the save loop. Must be called from a running loop."""
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
