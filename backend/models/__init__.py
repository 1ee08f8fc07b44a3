from models.dashboard import DashboardStats
from models.event import Event
from models.state import AnalyticsState
from models.student import StudentSummary

__all__ = ["AnalyticsState", "DashboardStats", "Event", "StudentSummary"]
