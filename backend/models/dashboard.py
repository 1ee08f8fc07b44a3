from models.base import CamelModel
from models.student import StudentSummary


class DashboardStats(CamelModel):
    total_registered: int
    total_active: int
    total_interactions: int         # raw event count
    total_chat_usage: int
    total_summarize_usage: int
    total_multimodal_usage: int
    total_rag_usage: int
    students_with_deployments: int
    students: list[StudentSummary]  # most interactions first
