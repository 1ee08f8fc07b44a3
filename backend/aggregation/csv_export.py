"""
CSV export of the per-student summaries, one row per student in insertion order.
"""

import csv
import io

from models.state import AnalyticsState
from models.student import StudentSummary

CSV_HEADER = [
    "Student ID",
    "Name",
    "Email",
    "GitHub Repo",
    "Deployed URL",
    "Total Interactions",
    "Chat Usage",
    "Summarize Usage",
    "Multimodal Usage",
    "RAG Usage",
    "Registered At",
    "Last Seen",
]


def _row(s: StudentSummary) -> list:
    return [
        s.email or s.name or "",
        s.name or "",
        s.email or "N/A",
        s.github_repo or "N/A",
        s.app_url or "N/A",
        s.total_interactions,
        s.chat_usage,
        s.summarize_usage,
        s.multimodal_usage or 0,
        s.rag_usage or 0,
        s.registered_at or s.first_seen or "N/A",
        s.last_seen or "N/A",
    ]


def export_csv(state: AnalyticsState) -> str:
    buf = io.StringIO()
    buf.write(",".join(CSV_HEADER) + "\n")

    # QUOTE_NONNUMERIC: text columns quoted, counters bare
    writer = csv.writer(buf, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    writer.writerows(_row(s) for s in state.students.values())

    return buf.getvalue()
