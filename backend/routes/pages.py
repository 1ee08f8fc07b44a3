from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["pages"])

VIEWS_DIR = Path(__file__).resolve().parent / "views"


def _render(name: str) -> HTMLResponse:
    return HTMLResponse((VIEWS_DIR / name).read_text(encoding="utf-8"))


@router.get("/", response_class=HTMLResponse)
async def registration_page():
    return _render("register.html")


@router.get("/dashboard", response_class=HTMLResponse)
async def dashboard_page():
    # The page polls /api/dashboard every 30 seconds
    return _render("dashboard.html")
