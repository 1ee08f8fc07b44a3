"""
JSON-file backed analytics store.

One AnalyticsStore is built per app (see main.create_app) and handed to the
routes through the get_store dependency. It owns the raw event log and the
per-student summaries, and rewrites the whole data file after every
mutation.

Durability is deliberately weak: a failed write is logged and the in-memory
state simply runs ahead of disk until the next successful write. A data file
that cannot be read at startup is logged and replaced by an empty state.
"""

import json
import logging
import os
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from fastapi import Request

from aggregation import dashboard_stats, export_csv
from errors import PersistenceError, ValidationError
from models.dashboard import DashboardStats
from models.event import Event
from models.state import AnalyticsState
from models.student import StudentSummary

logger = logging.getLogger(__name__)

MISSING_FIELDS = "Missing required fields"


def utc_now_iso() -> str:
    """Current UTC time as e.g. 2026-10-19T12:00:00.123Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


# ---------- Data file helpers ----------

def read_snapshot(path: Path) -> AnalyticsState:
    try:
        raw = path.read_text(encoding="utf-8")
        return AnalyticsState.model_validate(json.loads(raw))
    except (OSError, ValueError) as e:
        # ValueError covers both bad JSON and pydantic schema errors
        raise PersistenceError(f"Could not load analytics data from {path}: {e}") from e


def write_snapshot(path: Path, state: AnalyticsState) -> None:
    payload = json.dumps(state.model_dump(mode="json", by_alias=True), indent=2)
    tmp_path = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path.write_text(payload, encoding="utf-8")
        os.replace(tmp_path, path)
    except OSError as e:
        raise PersistenceError(f"Could not save analytics data to {path}: {e}") from e


# ---------- Store ----------

class AnalyticsStore:
    def __init__(self, data_file: Path):
        self.data_file = Path(data_file)
        self._state = AnalyticsState()
        self._last_timestamp = ""
        # One writer at a time; readers take it too so they never see a half-applied mutation
        self._lock = threading.Lock()

    def load(self) -> None:
        if not self.data_file.exists():
            logger.info("No analytics data at %s, starting empty", self.data_file)
            return

        try:
            state = read_snapshot(self.data_file)
        except PersistenceError as e:
            logger.error("%s; starting with empty analytics data", e)
            return

        with self._lock:
            self._state = state
            # Keep timestamps non-decreasing across restarts too
            if state.events:
                self._last_timestamp = max(self._last_timestamp, state.events[-1].timestamp)
        logger.info(
            "Loaded %d events for %d students from %s",
            len(state.events), len(state.students), self.data_file,
        )

    def _persist(self) -> None:
        try:
            write_snapshot(self.data_file, self._state)
        except PersistenceError as e:
            logger.error("%s; in-memory data is ahead of disk", e)

    def _next_timestamp(self) -> str:
        # Clamp so timestamps never go backwards if the wall clock does
        self._last_timestamp = max(utc_now_iso(), self._last_timestamp)
        return self._last_timestamp

    def lookup_or_create(self, student_id: str, **defaults) -> StudentSummary:
        """
        Return the live summary for student_id, creating it from defaults if absent.
        Callers must hold the store lock.
        """
        summary = self._state.students.get(student_id)
        if summary is None:
            summary = StudentSummary(**defaults)
            self._state.students[student_id] = summary
        return summary

    # ---------- Mutations ----------

    def record_event(
        self,
        student_id: Optional[str],
        event_type: Optional[str],
        student_name: Optional[str] = None,
        app_url: Optional[str] = None,
        ip: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> Event:
        """
        Append a usage event and fold it into the student's summary.
        The first event for an unknown student creates its summary.
        """
        if not student_id or not event_type:
            raise ValidationError(MISSING_FIELDS)

        with self._lock:
            timestamp = self._next_timestamp()
            event = Event(
                student_id=student_id,
                student_name=student_name or "Unknown",
                app_url=app_url or "Unknown",
                event_type=event_type,
                timestamp=timestamp,
                ip=ip,
                user_agent=user_agent,
            )
            self._state.events.append(event)

            summary = self.lookup_or_create(
                student_id,
                name=event.student_name,
                app_url=event.app_url,
                first_seen=timestamp,
                last_seen=timestamp,
            )
            summary.count_interaction(event_type, timestamp)

            self._persist()

        logger.debug("Tracked %s event for %s", event_type, student_id)
        return event

    def register_student(
        self,
        student_id: Optional[str],
        email: Optional[str],
        student_name: Optional[str] = None,
        github_repo: Optional[str] = None,
        deployed_url: Optional[str] = None,
    ) -> StudentSummary:
        """
        Register a student, or update the contact details of a known one.

        Re-registering overwrites email, and githubRepo / appUrl only when a
        non-empty value is given. Counters and first/last seen are never
        touched; registration is not an interaction.
        """
        if not student_id or not email:
            raise ValidationError(MISSING_FIELDS)

        with self._lock:
            summary = self._state.students.get(student_id)
            if summary is None:
                summary = self.lookup_or_create(
                    student_id,
                    name=student_name or email,
                    email=email,
                    github_repo=github_repo or "Not provided",
                    app_url=deployed_url or "Not deployed yet",
                    registered_at=self._next_timestamp(),
                    first_seen=None,
                    last_seen=None,
                )
            else:
                summary.email = email
                if github_repo:
                    summary.github_repo = github_repo
                if deployed_url:
                    summary.app_url = deployed_url

            self._persist()
            result = summary.model_copy()

        logger.debug("Registered student %s", student_id)
        return result

    # ---------- Reads ----------

    def snapshot(self) -> AnalyticsState:
        with self._lock:
            return self._state.model_copy(deep=True)

    def raw_snapshot(self) -> dict:
        """The full state in its on-disk JSON shape."""
        with self._lock:
            return self._state.model_dump(mode="json", by_alias=True)

    def dashboard_stats(self) -> DashboardStats:
        return dashboard_stats(self.snapshot())

    def export_csv(self) -> str:
        return export_csv(self.snapshot())


def get_store(request: Request) -> AnalyticsStore:
    """FastAPI dependency: the store attached to the running app."""
    return request.app.state.store
