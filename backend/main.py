from dotenv import load_dotenv
load_dotenv()

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import config
from errors import ValidationError
from routes import pages, reports, tracking
from store import AnalyticsStore, utc_now_iso

logger = logging.getLogger(__name__)


def create_app(data_file: Optional[Path] = None) -> FastAPI:
    """
    Builds the API around a single AnalyticsStore loaded from data_file
    (config.DATA_FILE by default).
    """
    app = FastAPI(title="Workshop Analytics API", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    store = AnalyticsStore(data_file or config.DATA_FILE)
    store.load()
    app.state.store = store

    @app.exception_handler(ValidationError)
    async def validation_error(request: Request, exc: ValidationError):
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    app.include_router(tracking.router)
    app.include_router(reports.router)
    app.include_router(pages.router)

    @app.get("/health")
    def health():
        return {"status": "healthy", "timestamp": utc_now_iso()}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    base_url = f"http://localhost:{config.PORT}"
    logger.info("Registration: %s/", base_url)
    logger.info("Dashboard:    %s/dashboard", base_url)
    logger.info("API:          %s/api/track", base_url)
    uvicorn.run(app, host=config.HOST, port=config.PORT)
