"""FastAPI application for the speedgolf scoring engine."""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import ParSettings, load_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[ParSettings] = None) -> FastAPI:
    app = FastAPI(
        title="Speedgolf Scoring API",
        version="1.0.0",
    )
    app.state.settings = settings or load_settings()
    logger.info("Par settings: %s", app.state.settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:5173"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from api.routers import courses, scoring, time_entry
    app.include_router(courses.router, prefix="/api/courses", tags=["courses"])
    app.include_router(scoring.router, prefix="/api/scoring", tags=["scoring"])
    app.include_router(time_entry.router, prefix="/api/time-entry", tags=["time-entry"])

    @app.get("/api/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
