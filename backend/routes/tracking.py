from typing import Optional

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from models.base import CamelModel
from store import AnalyticsStore, get_store

router = APIRouter(prefix="/api", tags=["tracking"])


# ---------- Request / Response schemas ----------
# Required fields are Optional here so a missing one is answered by the
# store's "Missing required fields" 400, not FastAPI's generic 422.

class TrackRequest(CamelModel):
    student_id: Optional[str] = None
    student_name: Optional[str] = None
    app_url: Optional[str] = None
    event_type: Optional[str] = None


class RegisterRequest(CamelModel):
    student_id: Optional[str] = None
    student_name: Optional[str] = None
    email: Optional[str] = None
    github_repo: Optional[str] = None
    deployed_url: Optional[str] = None


class AckResponse(BaseModel):
    success: bool = True
    message: str


# ---------- Endpoints ----------

@router.post("/track", response_model=AckResponse)
async def track_event(
    body: TrackRequest,
    request: Request,
    store: AnalyticsStore = Depends(get_store),
):
    """
    Records one feature-use event (chat, summarize, multimodal, rag) sent by a
    student's workshop app.
    """
    store.record_event(
        body.student_id,
        body.event_type,
        student_name=body.student_name,
        app_url=body.app_url,
        ip=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )
    return AckResponse(message="Event tracked")


@router.post("/register", response_model=AckResponse)
async def register_student(body: RegisterRequest, store: AnalyticsStore = Depends(get_store)):
    store.register_student(
        body.student_id,
        body.email,
        student_name=body.student_name,
        github_repo=body.github_repo,
        deployed_url=body.deployed_url,
    )
    return AckResponse(message="Student registered")
