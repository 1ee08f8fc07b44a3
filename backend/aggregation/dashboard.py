"""
Dashboard statistics.

Pure fold over an AnalyticsState snapshot: no I/O, same input -> same output.
"""

from models.dashboard import DashboardStats
from models.state import AnalyticsState
from models.student import StudentSummary

# appUrl placeholders written by the track / register defaults
NOT_DEPLOYED = ("Unknown", "Not deployed yet")


def has_deployment(student: StudentSummary) -> bool:
    return bool(student.app_url) and student.app_url not in NOT_DEPLOYED


def dashboard_stats(state: AnalyticsState) -> DashboardStats:
    """
    Summarise the store for the dashboard.

    total_interactions counts raw events rather than summing the per-student
    totals. The two agree as long as events are never removed.

    students is sorted by total_interactions descending; sorted() is stable,
    so ties keep their insertion order.
    """
    students = list(state.students.values())

    return DashboardStats(
        total_registered=len(students),
        total_active=sum(1 for s in students if s.total_interactions > 0),
        total_interactions=len(state.events),
        total_chat_usage=sum(s.chat_usage for s in students),
        total_summarize_usage=sum(s.summarize_usage for s in students),
        total_multimodal_usage=sum(s.multimodal_usage for s in students),
        total_rag_usage=sum(s.rag_usage for s in students),
        students_with_deployments=sum(1 for s in students if has_deployment(s)),
        students=sorted(students, key=lambda s: s.total_interactions, reverse=True),
    )
