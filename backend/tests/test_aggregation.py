"""
Dashboard statistics and CSV export, computed from hand-built states.
"""

from aggregation import dashboard_stats, export_csv
from aggregation.csv_export import CSV_HEADER
from models.event import Event
from models.state import AnalyticsState
from models.student import StudentSummary

TS = "2026-03-01T10:00:00.000Z"


def _event(student_id: str, event_type: str) -> Event:
    return Event(student_id=student_id, event_type=event_type, timestamp=TS)


def _state() -> AnalyticsState:
    return AnalyticsState(
        events=[
            _event("ann", "chat"),
            _event("ann", "rag"),
            _event("bob", "summarize"),
            _event("cat", "multimodal"),
            _event("cat", "other"),
        ],
        students={
            "dan": StudentSummary(
                name="Dan", email="dan@x.com", github_repo="Not provided",
                app_url="Not deployed yet", registered_at=TS,
            ),
            "bob": StudentSummary(
                name="Bob", app_url="https://bob.example.com",
                total_interactions=1, summarize_usage=1, first_seen=TS, last_seen=TS,
            ),
            "ann": StudentSummary(
                name="Ann", app_url="Unknown",
                total_interactions=2, chat_usage=1, rag_usage=1, first_seen=TS, last_seen=TS,
            ),
            "cat": StudentSummary(
                name="Cat", app_url="https://cat.example.com",
                total_interactions=2, multimodal_usage=1, first_seen=TS, last_seen=TS,
            ),
        },
    )


# ── dashboard_stats ───────────────────────────────────────────────────────


class TestDashboardStats:

    def setup_method(self):
        self.state = _state()
        self.stats = dashboard_stats(self.state)

    def test_totals(self):
        assert self.stats.total_registered == 4
        assert self.stats.total_active == 3
        assert self.stats.total_interactions == 5
        assert self.stats.total_chat_usage == 1
        assert self.stats.total_summarize_usage == 1
        assert self.stats.total_multimodal_usage == 1
        assert self.stats.total_rag_usage == 1

    def test_deployments_ignore_placeholders(self):
        assert self.stats.students_with_deployments == 2

    def test_students_sorted_with_stable_ties(self):
        assert [s.name for s in self.stats.students] == ["Ann", "Cat", "Bob", "Dan"]

    def test_empty_state(self):
        stats = dashboard_stats(AnalyticsState())
        assert stats.total_registered == 0
        assert stats.total_interactions == 0
        assert stats.students == []

    def test_pure(self):
        before = self.state.model_dump()
        again = dashboard_stats(self.state)
        assert again == self.stats
        assert self.state.model_dump() == before
        assert list(self.state.students) == ["dan", "bob", "ann", "cat"]

    def test_wire_keys_are_camel_case(self):
        payload = self.stats.model_dump(mode="json", by_alias=True)
        assert payload["totalRegistered"] == 4
        assert payload["studentsWithDeployments"] == 2
        assert "totalRagUsage" in payload
        assert payload["students"][0]["totalInteractions"] == 2
        # Unregistered students carry no email / githubRepo / registeredAt
        assert "email" not in payload["students"][0]
        assert payload["students"][3]["email"] == "dan@x.com"


# ── export_csv ────────────────────────────────────────────────────────────


class TestExportCsv:

    def test_header_only_when_empty(self):
        assert export_csv(AnalyticsState()) == ",".join(CSV_HEADER) + "\n"

    def test_rows_in_insertion_order(self):
        lines = export_csv(_state()).splitlines()

        assert lines[0] == (
            "Student ID,Name,Email,GitHub Repo,Deployed URL,Total Interactions,"
            "Chat Usage,Summarize Usage,Multimodal Usage,RAG Usage,Registered At,Last Seen"
        )
        assert lines[1] == (
            f'"dan@x.com","Dan","dan@x.com","Not provided","Not deployed yet",'
            f'0,0,0,0,0,"{TS}","N/A"'
        )
        assert lines[2] == (
            f'"Bob","Bob","N/A","N/A","https://bob.example.com",'
            f'1,0,1,0,0,"{TS}","{TS}"'
        )
        assert len(lines) == 5

    def test_missing_values_fall_back(self):
        state = AnalyticsState(students={"x": StudentSummary()})
        row = export_csv(state).splitlines()[1]
        assert row == '"","","N/A","N/A","N/A",0,0,0,0,0,"N/A","N/A"'

    def test_embedded_quotes_are_doubled(self):
        state = AnalyticsState(students={"x": StudentSummary(name='Ann "the dev"', app_url="Unknown")})
        row = export_csv(state).splitlines()[1]
        assert row.startswith('"Ann ""the dev""","Ann ""the dev""",')
