from typing import Optional

from pydantic import model_serializer

from models.base import CamelModel

# eventType -> counter attribute. Other event types only bump total_interactions.
FEATURE_COUNTERS = {
    "chat": "chat_usage",
    "summarize": "summarize_usage",
    "multimodal": "multimodal_usage",
    "rag": "rag_usage",
}

# Only written out once the student has registered
_REGISTRATION_KEYS = ("email", "github_repo", "githubRepo", "registered_at", "registeredAt")


class StudentSummary(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    github_repo: Optional[str] = None
    app_url: Optional[str] = None
    total_interactions: int = 0
    chat_usage: int = 0
    summarize_usage: int = 0
    multimodal_usage: int = 0
    rag_usage: int = 0
    registered_at: Optional[str] = None     # set once, on first registration
    first_seen: Optional[str] = None
    last_seen: Optional[str] = None

    def count_interaction(self, event_type: str, timestamp: str) -> None:
        self.total_interactions += 1
        self.last_seen = timestamp
        counter = FEATURE_COUNTERS.get(event_type)
        if counter is not None:
            setattr(self, counter, getattr(self, counter) + 1)

    @model_serializer(mode="wrap")
    def _omit_unregistered(self, handler):
        data = handler(self)
        for key in _REGISTRATION_KEYS:
            if key in data and data[key] is None:
                del data[key]
        return data
