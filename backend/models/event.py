from typing import Optional

from pydantic import ConfigDict

from models.base import CamelModel


class Event(CamelModel):
    model_config = ConfigDict(frozen=True)

    student_id: str
    student_name: str = "Unknown"
    app_url: str = "Unknown"
    event_type: str     # "chat" | "summarize" | "multimodal" | "rag" | anything else
    timestamp: str      # ISO-8601 UTC, assigned by the store
    ip: Optional[str] = None
    user_agent: Optional[str] = None
