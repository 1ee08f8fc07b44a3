from pydantic import Field

from models.base import CamelModel
from models.event import Event
from models.student import StudentSummary


class AnalyticsState(CamelModel):
    """The whole persisted document: raw events plus per-student summaries keyed by studentId."""

    events: list[Event] = Field(default_factory=list)
    students: dict[str, StudentSummary] = Field(default_factory=dict)
