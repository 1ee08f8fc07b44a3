from typing import Optional

from fastapi import APIRouter, Depends, Response

from models.dashboard import DashboardStats
from store import AnalyticsStore, get_store

router = APIRouter(prefix="/api", tags=["reports"])

CSV_FILENAME = "workshop-analytics.csv"


@router.get("/dashboard", response_model=DashboardStats)
async def get_dashboard(store: AnalyticsStore = Depends(get_store)):
    """Totals across all students, plus every student sorted by interactions."""
    return store.dashboard_stats()


@router.get("/export")
async def export_data(format: Optional[str] = None, store: AnalyticsStore = Depends(get_store)):
    """
    ?format=csv downloads the per-student summary as a CSV attachment.
    Without it, returns the raw events and summaries as JSON.
    """
    if format == "csv":
        return Response(
            content=store.export_csv(),
            media_type="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{CSV_FILENAME}"'},
        )

    return store.raw_snapshot()
